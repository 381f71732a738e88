"""Built-in version comparators, one module per versioning scheme."""

from constants import KnownSchemes

from ..models import VersionProvider
from .alpine import AlpineVersion
from .debian import DebianVersion
from .generic import GenericVersion
from .golang import GoVersion
from .maven import MavenVersion
from .npm import NpmVersion
from .pypi import PypiVersion
from .rpm import RpmVersion


def _provider(scheme: KnownSchemes, constructor) -> VersionProvider:
    return VersionProvider(
        schemes=frozenset({scheme.value}),
        constructor=constructor,
        name=f"builtin-{scheme.value}",
    )


GENERIC_PROVIDER = _provider(KnownSchemes.GENERIC, GenericVersion)

BUILTIN_PROVIDERS = [
    _provider(KnownSchemes.ALPINE, lambda _scheme, version_str: AlpineVersion(version_str)),
    _provider(KnownSchemes.DEBIAN, lambda _scheme, version_str: DebianVersion(version_str)),
    GENERIC_PROVIDER,
    _provider(KnownSchemes.GOLANG, lambda _scheme, version_str: GoVersion(version_str)),
    _provider(KnownSchemes.MAVEN, lambda _scheme, version_str: MavenVersion(version_str)),
    _provider(KnownSchemes.NPM, lambda _scheme, version_str: NpmVersion(version_str)),
    _provider(KnownSchemes.PYPI, lambda _scheme, version_str: PypiVersion(version_str)),
    _provider(KnownSchemes.RPM, lambda _scheme, version_str: RpmVersion(version_str)),
]

__all__ = [
    "AlpineVersion",
    "DebianVersion",
    "GenericVersion",
    "GoVersion",
    "MavenVersion",
    "NpmVersion",
    "PypiVersion",
    "RpmVersion",
    "BUILTIN_PROVIDERS",
    "GENERIC_PROVIDER",
]
