"""RPM package versions (``[epoch:]version[-release]``).

Comparison is a port of ``rpmvercmp`` from rpm 4.19.
"""

from __future__ import annotations

import re
from typing import Optional

from constants import KnownSchemes

from ..errors import InvalidVersionError
from ..models import Version

_VERSION_RE = re.compile(r"^(?:(?P<epoch>\d+):)?(?P<version>[^-]+?)(?:-(?P<release>[^-]+))?$")
_SEGMENT_RE = re.compile(r"[a-zA-Z]+|[0-9]+|~|\^")


def _is_numeric(segment: str) -> bool:
    return bool(segment) and segment.isdigit() and segment.isascii()


def rpmvercmp(a: str, b: str) -> int:
    """Compare two RPM version or release strings."""
    if a == b:
        return 0

    segments_a = _SEGMENT_RE.findall(a)
    segments_b = _SEGMENT_RE.findall(b)

    for i in range(max(len(segments_a), len(segments_b))):
        seg_a = segments_a[i] if i < len(segments_a) else ""
        seg_b = segments_b[i] if i < len(segments_b) else ""

        # Tilde sorts before everything else, including the end of the string.
        if seg_a == "~" or seg_b == "~":
            if seg_a != "~":
                return 1
            if seg_b != "~":
                return -1
            continue

        # Caret sorts like tilde, except that the end of the string is lower.
        if seg_a == "^" or seg_b == "^":
            if not seg_a:
                return -1
            if not seg_b:
                return 1
            if seg_a != "^":
                return 1
            if seg_b != "^":
                return -1
            continue

        if not seg_a or not seg_b:
            break

        if _is_numeric(seg_a):
            # Numeric segments are always newer than alpha segments.
            if not _is_numeric(seg_b):
                return 1
            seg_a = seg_a.lstrip("0")
            seg_b = seg_b.lstrip("0")
            if len(seg_a) != len(seg_b):
                return 1 if len(seg_a) > len(seg_b) else -1
        elif _is_numeric(seg_b):
            return -1

        if seg_a != seg_b:
            return -1 if seg_a < seg_b else 1

    # All segments matched but the separators differed.
    return (len(segments_a) > len(segments_b)) - (len(segments_a) < len(segments_b))


class RpmVersion(Version):
    """An RPM version."""

    def __init__(self, version_str: str):
        super().__init__(KnownSchemes.RPM.value, version_str)
        match = _VERSION_RE.match(version_str or "")
        if match is None:
            raise InvalidVersionError(
                KnownSchemes.RPM.value,
                version_str,
                f'Provided version "{version_str}" does not match the RPM version format '
                "[epoch:]version[-release]",
            )
        self._epoch = int(match.group("epoch") or 0)
        self._version = match.group("version")
        self._release: Optional[str] = match.group("release")

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def version(self) -> str:
        return self._version

    @property
    def release(self) -> Optional[str]:
        return self._release

    def is_stable(self) -> bool:
        return True

    def compare_to(self, other: Version) -> int:
        self._check_comparable(other)
        if (self._epoch, self._version, self._release) == (other._epoch, other._version, other._release):
            return 0
        if self._epoch != other._epoch:
            return -1 if self._epoch < other._epoch else 1
        result = rpmvercmp(self._version, other._version)
        if result != 0:
            return result
        return rpmvercmp(self._release or "", other._release or "")
