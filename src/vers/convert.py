"""Conversion of advisory database ranges (GHSA, OSV, NVD) into vers ranges.

Also maps ecosystem names used by those databases, and purl types, onto
versioning scheme tokens.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from common.logging_utils import extra_context, is_debug_enabled
from constants import ConfigError, KnownSchemes
from versioning.errors import InvalidRangeError

from .comparator import Comparator
from .range import Vers

logger = logging.getLogger(__name__)

SCHEME_CPAN = "cpan"
SCHEME_GEM = "gem"
SCHEME_NUGET = "nuget"

# https://docs.github.com/en/rest/security-advisories/global-advisories
_GHSA_ECOSYSTEMS: Dict[str, str] = {
    "go": KnownSchemes.GOLANG.value,
    "maven": KnownSchemes.MAVEN.value,
    "npm": KnownSchemes.NPM.value,
    "nuget": SCHEME_NUGET,
    "pip": KnownSchemes.PYPI.value,
    "rubygems": SCHEME_GEM,
}

# https://ossf.github.io/osv-schema/#affectedpackage-field
_OSV_ECOSYSTEMS: Dict[str, str] = {
    "almalinux": KnownSchemes.RPM.value,
    "alpine": KnownSchemes.ALPINE.value,
    "debian": KnownSchemes.DEBIAN.value,
    "go": KnownSchemes.GOLANG.value,
    "mageia": KnownSchemes.RPM.value,
    "maven": KnownSchemes.MAVEN.value,
    "npm": KnownSchemes.NPM.value,
    "nuget": SCHEME_NUGET,
    "opensuse": KnownSchemes.RPM.value,
    "photon os": KnownSchemes.RPM.value,
    "pypi": KnownSchemes.PYPI.value,
    "red hat": KnownSchemes.RPM.value,
    "rocky linux": KnownSchemes.RPM.value,
    "rubygems": SCHEME_GEM,
    "suse": KnownSchemes.RPM.value,
    "ubuntu": KnownSchemes.DEBIAN.value,
}

# https://github.com/package-url/purl-spec/blob/master/PURL-TYPES.rst
_PURL_TYPES: Dict[str, str] = {
    "apk": KnownSchemes.ALPINE.value,
    "clojars": KnownSchemes.MAVEN.value,
    "cpan": SCHEME_CPAN,
    "deb": KnownSchemes.DEBIAN.value,
    "gem": SCHEME_GEM,
    "generic": KnownSchemes.GENERIC.value,
    "golang": KnownSchemes.GOLANG.value,
    "gradle": KnownSchemes.MAVEN.value,
    "maven": KnownSchemes.MAVEN.value,
    "npm": KnownSchemes.NPM.value,
    "nuget": SCHEME_NUGET,
    "pypi": KnownSchemes.PYPI.value,
    "rpm": KnownSchemes.RPM.value,
}

_ALIAS_TABLES = {"ghsa": _GHSA_ECOSYSTEMS, "osv": _OSV_ECOSYSTEMS}

_DEBIAN_UNBOUNDED_SENTINELS = frozenset({"<end-of-life>", "<unfixed>"})

_GHSA_OPERATORS = (
    ("<=", Comparator.LESS_THAN_OR_EQUAL),
    ("<", Comparator.LESS_THAN),
    (">=", Comparator.GREATER_THAN_OR_EQUAL),
    (">", Comparator.GREATER_THAN),
    ("=", Comparator.EQUAL),
)

_OSV_EVENTS = {
    "introduced": Comparator.GREATER_THAN_OR_EQUAL,
    "fixed": Comparator.LESS_THAN,
    "limit": Comparator.LESS_THAN,
    "last_affected": Comparator.LESS_THAN_OR_EQUAL,
}

OsvEvent = Union[Tuple[str, str], Mapping[str, str]]


def register_ecosystem_alias(source: str, ecosystem: str, scheme: str) -> None:
    """Map an additional ecosystem name of ``source`` (``ghsa`` or ``osv``) to a scheme."""
    table = _ALIAS_TABLES.get(source.lower())
    if table is None:
        raise ConfigError(f"Unknown advisory source for ecosystem aliases: {source}")
    table[ecosystem.lower()] = scheme


def apply_config(config: Mapping[str, Any]) -> None:
    """Register ecosystem aliases from a loaded configuration mapping."""
    ecosystems = config.get("ecosystems") or {}
    if not isinstance(ecosystems, Mapping):
        raise ConfigError("'ecosystems' must be a mapping of source to aliases")
    for source, aliases in ecosystems.items():
        if not isinstance(aliases, Mapping):
            raise ConfigError(f"'ecosystems.{source}' must be a mapping of ecosystem to scheme")
        for ecosystem, scheme in aliases.items():
            register_ecosystem_alias(str(source), str(ecosystem), str(scheme))


def scheme_from_ghsa_ecosystem(ecosystem: str) -> Optional[str]:
    """Return the scheme for a GitHub Security Advisory ecosystem, if known."""
    return _GHSA_ECOSYSTEMS.get(ecosystem.lower())


def _osv_base_ecosystem(ecosystem: str) -> str:
    # "Debian:11", "Alpine:v3.16"
    return ecosystem.split(":", 1)[0].strip()


def scheme_from_osv_ecosystem(ecosystem: str) -> Optional[str]:
    """Return the scheme for an OSV ecosystem, if known."""
    return _OSV_ECOSYSTEMS.get(_osv_base_ecosystem(ecosystem).lower())


def scheme_from_purl(purl: str) -> Optional[str]:
    """Return the scheme for the type of a Package URL, if known.

    Raises:
        ValueError: If ``purl`` is not a Package URL.
    """
    if not purl or not purl.startswith("pkg:"):
        raise ValueError(f"The provided purl is invalid: {purl}")
    purl_type, sep, _ = purl[len("pkg:"):].lstrip("/").partition("/")
    if not sep or not purl_type:
        raise ValueError(f"The provided purl is invalid: {purl}")
    return _PURL_TYPES.get(purl_type.lower())


def vers_from_ghsa_range(ecosystem: str, range_expr: str) -> Vers:
    """Convert a GHSA range such as ``>= 1.2.3, < 5.0.1``.

    Args:
        ecosystem: GHSA ecosystem of the affected package.
        range_expr: Comma-separated constraints.

    Returns:
        Vers: The validated range.

    Raises:
        InvalidRangeError: If a constraint has no known operator, or the range is invalid.
        InvalidVersionError: If a version is invalid for the inferred scheme.
    """
    scheme = scheme_from_ghsa_ecosystem(ecosystem) or ecosystem.lower()
    builder = Vers.builder(scheme)
    for position, expr in enumerate(range_expr.split(",")):
        expr = expr.strip()
        for operator, comparator in _GHSA_OPERATORS:
            if expr.startswith(operator):
                builder.with_constraint(comparator, expr[len(operator):].strip())
                break
        else:
            raise InvalidRangeError(f'Invalid constraint "{expr}" at position {position}')
    return builder.build()


def _iter_events(events: Iterable[OsvEvent]):
    for event in events:
        if isinstance(event, Mapping):
            yield from event.items()
        else:
            kind, value = event
            yield kind, value


def vers_from_osv_range(
    range_type: Optional[str],
    ecosystem: str,
    events: Iterable[OsvEvent],
    database_specific: Optional[Mapping[str, Any]] = None,
) -> Vers:
    """Convert an OSV ``affected[].ranges[]`` entry.

    Args:
        range_type: ``ECOSYSTEM`` or ``SEMVER``.
        ecosystem: OSV ecosystem of the affected package.
        events: Range events, either ``{"introduced": "1.0"}`` mappings or
            ``("introduced", "1.0")`` pairs.
        database_specific: Optional ``database_specific`` object of the range.

    Returns:
        Vers: The validated range.
    """
    if not range_type or range_type.lower() not in ("ecosystem", "semver"):
        raise InvalidRangeError(f'Range type "{range_type}" is not supported')

    scheme = scheme_from_osv_ecosystem(ecosystem) or _osv_base_ecosystem(ecosystem).lower()
    builder = Vers.builder(scheme)

    for position, (kind, value) in enumerate(_iter_events(events)):
        comparator = _OSV_EVENTS.get(kind)
        if comparator is None:
            raise InvalidRangeError(f'Invalid event "{kind}" at position {position}')

        if (
            scheme == KnownSchemes.DEBIAN.value
            and comparator.is_upper_bound
            and value in _DEBIAN_UNBOUNDED_SENTINELS
        ):
            # Not a version; every version from the lower bound on is affected.
            if is_debug_enabled(logger):
                logger.debug(
                    "Skipping Debian sentinel upper bound",
                    extra=extra_context(
                        event="osv_event_skipped",
                        component="convert",
                        scheme=scheme,
                        value=value,
                    ),
                )
            continue

        builder.with_constraint(comparator, value)

    last_known = (database_specific or {}).get("last_known_affected_version_range")
    if isinstance(last_known, str):
        if last_known.startswith("<="):
            builder.with_constraint(Comparator.LESS_THAN_OR_EQUAL, last_known[2:].strip())
        elif last_known.startswith("<"):
            builder.with_constraint(Comparator.LESS_THAN, last_known[1:].strip())

    return builder.build()


def _present(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


def vers_from_nvd_range(
    start_excluding: Optional[str],
    start_including: Optional[str],
    end_excluding: Optional[str],
    end_including: Optional[str],
    exact_version: Optional[str],
) -> Optional[Vers]:
    """Convert an NVD CPE match into a ``generic`` range.

    Without explicit bounds, ``exact_version`` decides: ``*`` means every
    version, ``-`` means no version (None is returned), anything else is a
    single affected version.
    """
    builder = Vers.builder(KnownSchemes.GENERIC.value)
    if _present(start_excluding):
        builder.with_constraint(Comparator.GREATER_THAN, start_excluding)
    if _present(start_including):
        builder.with_constraint(Comparator.GREATER_THAN_OR_EQUAL, start_including)
    if _present(end_excluding):
        builder.with_constraint(Comparator.LESS_THAN, end_excluding)
    if _present(end_including):
        builder.with_constraint(Comparator.LESS_THAN_OR_EQUAL, end_including)

    if not builder.has_constraints() and exact_version is not None:
        if exact_version == "*":
            builder.with_constraint(Comparator.WILDCARD, None)
        elif exact_version != "-":
            builder.with_constraint(Comparator.EQUAL, exact_version)

    return builder.maybe_build()
