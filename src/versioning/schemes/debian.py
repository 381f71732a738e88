"""Debian package versions (``[epoch:]upstream_version[-debian_revision]``).

Ordering follows deb-version(5): the epoch is compared numerically, then the
upstream version and the revision are compared by alternating runs of
non-digits and digits. A tilde sorts before anything, even the end of a part.
"""

from __future__ import annotations

import re
from typing import List

from constants import KnownSchemes

from ..errors import InvalidVersionError
from ..models import Version

_VERSION_RE = re.compile(
    r"^(?:(?P<epoch>\d+):)?(?P<upstream>[A-Za-z0-9.+\-:~]+?)(?:-(?P<revision>[A-Za-z0-9+.~]+))?$"
)
_RUN_RE = re.compile(r"[0-9]+|[^0-9]+")
_NUMERIC_RE = re.compile(r"[0-9]+")


def _char_order(char: str) -> int:
    if char == "~":
        return -1
    if "0" <= char <= "9":
        return int(char) + 1
    if char.isalpha():
        return ord(char)
    return ord(char) + 255


def _compare_string(part_a: str, part_b: str) -> int:
    orders_a = [_char_order(c) for c in part_a]
    orders_b = [_char_order(c) for c in part_b]
    for i in range(max(len(orders_a), len(orders_b))):
        a = orders_a[i] if i < len(orders_a) else 0
        b = orders_b[i] if i < len(orders_b) else 0
        if a != b:
            return -1 if a < b else 1
    return 0


def _compare_part(part_a: str, part_b: str) -> int:
    runs_a: List[str] = _RUN_RE.findall(part_a)
    runs_b: List[str] = _RUN_RE.findall(part_b)
    for i in range(max(len(runs_a), len(runs_b))):
        a = runs_a[i] if i < len(runs_a) else "0"
        b = runs_b[i] if i < len(runs_b) else "0"
        if _NUMERIC_RE.fullmatch(a) and _NUMERIC_RE.fullmatch(b):
            result = (int(a) > int(b)) - (int(a) < int(b))
        else:
            result = _compare_string(a, b)
        if result != 0:
            return result
    return 0


class DebianVersion(Version):
    """A Debian version."""

    def __init__(self, version_str: str):
        super().__init__(KnownSchemes.DEBIAN.value, version_str)
        match = _VERSION_RE.match(version_str or "")
        if match is None:
            raise InvalidVersionError(
                KnownSchemes.DEBIAN.value,
                version_str,
                f'Provided version "{version_str}" does not match the Debian version format '
                "[epoch:]upstream-version[-debian-revision]",
            )
        self._epoch = int(match.group("epoch") or 0)
        self._upstream_version = match.group("upstream")
        self._debian_revision = match.group("revision") or "0"

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def upstream_version(self) -> str:
        return self._upstream_version

    @property
    def debian_revision(self) -> str:
        return self._debian_revision

    def is_stable(self) -> bool:
        # Stability of Debian packages depends on the distribution they ship in.
        return True

    def compare_to(self, other: Version) -> int:
        self._check_comparable(other)
        if self._epoch != other._epoch:
            return -1 if self._epoch < other._epoch else 1
        result = _compare_part(self._upstream_version, other._upstream_version)
        if result != 0:
            return result
        return _compare_part(self._debian_revision, other._debian_revision)
