"""Go module versions.

Parsing and ordering follow ``golang.org/x/mod/semver``. The leading ``v`` is
optional and the short forms ``v1`` and ``v1.2`` stand for ``v1.0.0`` and
``v1.2.0``.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from constants import KnownSchemes

from ..errors import InvalidVersionError
from ..models import Version

_INT_RE = re.compile(r"0|[1-9][0-9]*")
_IDENT_RE = re.compile(r"[0-9A-Za-z-]+")
_NUMERIC_RE = re.compile(r"[0-9]+")


class _ParseError(Exception):
    pass


def _parse_int(text: str, pos: int) -> Tuple[str, int]:
    match = _INT_RE.match(text, pos)
    if match is None:
        raise _ParseError(f"expected a number at position {pos}")
    end = match.end()
    if end < len(text) and "0" <= text[end] <= "9":
        raise _ParseError("numbers must not have leading zeros")
    return match.group(), end


def _parse_identifiers(text: str, check_numeric: bool) -> Tuple[str, ...]:
    identifiers = tuple(text.split("."))
    for identifier in identifiers:
        if not _IDENT_RE.fullmatch(identifier):
            raise _ParseError(f'invalid identifier "{identifier}"')
        if check_numeric and _NUMERIC_RE.fullmatch(identifier) and len(identifier) > 1 and identifier[0] == "0":
            raise _ParseError(f'numeric identifier "{identifier}" has a leading zero')
    return identifiers


def _is_numeric(identifier: str) -> bool:
    return _NUMERIC_RE.fullmatch(identifier) is not None


def _compare_int(a: str, b: str) -> int:
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    return (a > b) - (a < b)


def compare_prerelease(a: Tuple[str, ...], b: Tuple[str, ...]) -> int:
    """Compare two prerelease identifier lists, an empty list sorting last."""
    if a == b:
        return 0
    if not a:
        return 1
    if not b:
        return -1
    for ident_a, ident_b in zip(a, b):
        if ident_a == ident_b:
            continue
        numeric_a = _is_numeric(ident_a)
        numeric_b = _is_numeric(ident_b)
        if numeric_a != numeric_b:
            return -1 if numeric_a else 1
        if numeric_a:
            return _compare_int(ident_a, ident_b)
        return -1 if ident_a < ident_b else 1
    return -1 if len(a) < len(b) else 1


class GoVersion(Version):
    """A Go module version."""

    def __init__(self, version_str: str):
        super().__init__(KnownSchemes.GOLANG.value, version_str)
        try:
            self._parse(version_str or "")
        except _ParseError as exc:
            raise InvalidVersionError(
                KnownSchemes.GOLANG.value, version_str, f'Invalid Go version "{version_str}": {exc}'
            ) from exc

    def _parse(self, text: str) -> None:
        pos = 1 if text.startswith("v") else 0
        self._major, pos = _parse_int(text, pos)
        self._minor = "0"
        self._patch = "0"
        self._prerelease: Tuple[str, ...] = ()
        self._build: Optional[str] = None
        if pos == len(text):
            return
        if text[pos] != ".":
            raise _ParseError(f"expected '.' at position {pos}")
        self._minor, pos = _parse_int(text, pos + 1)
        if pos == len(text):
            return
        if text[pos] != ".":
            raise _ParseError(f"expected '.' at position {pos}")
        self._patch, pos = _parse_int(text, pos + 1)
        rest = text[pos:]
        build_at = rest.find("+")
        if build_at >= 0:
            build = rest[build_at + 1:]
            _parse_identifiers(build, check_numeric=False)
            self._build = build
            rest = rest[:build_at]
        if rest:
            if not rest.startswith("-"):
                raise _ParseError(f"unexpected trailing text {rest!r}")
            self._prerelease = _parse_identifiers(rest[1:], check_numeric=True)

    @property
    def major(self) -> int:
        return int(self._major)

    @property
    def minor(self) -> int:
        return int(self._minor)

    @property
    def patch(self) -> int:
        return int(self._patch)

    @property
    def prerelease(self) -> Tuple[str, ...]:
        return self._prerelease

    @property
    def build(self) -> Optional[str]:
        return self._build

    def is_stable(self) -> bool:
        return not self._prerelease

    def compare_to(self, other: Version) -> int:
        self._check_comparable(other)
        for a, b in (
            (self._major, other._major),
            (self._minor, other._minor),
            (self._patch, other._patch),
        ):
            result = _compare_int(a, b)
            if result != 0:
                return result
        return compare_prerelease(self._prerelease, other._prerelease)
