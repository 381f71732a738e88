"""Fallback versions for schemes without a dedicated comparator.

The text is lower-cased and broken into runs of digits and runs of letters;
every other character only separates runs.
"""

from __future__ import annotations

import re
from typing import Tuple, Union

from constants import KnownSchemes

from ..errors import InvalidVersionError
from ..models import Version

_COMPONENT_RE = re.compile(r"[0-9]+|[a-z]+")

Component = Union[int, str]


def split_components(version_str: str) -> Tuple[Component, ...]:
    """Break a version string into integer and alphabetic components."""
    return tuple(
        int(part) if part.isdigit() else part
        for part in _COMPONENT_RE.findall(version_str.lower())
    )


def compare_components(a: Tuple[Component, ...], b: Tuple[Component, ...]) -> int:
    for i in range(max(len(a), len(b))):
        if i >= len(a):
            # 1.0 < 1.0.1, but 1.0rc1 < 1.0
            return -1 if isinstance(b[i], int) else 1
        if i >= len(b):
            return 1 if isinstance(a[i], int) else -1
        left, right = a[i], b[i]
        if isinstance(left, int) != isinstance(right, int):
            return 1 if isinstance(left, int) else -1
        if left != right:
            return -1 if left < right else 1
    return 0


class GenericVersion(Version):
    """A loosely structured version keeping the scheme it was requested for."""

    def __init__(self, scheme: str, version_str: str):
        super().__init__(scheme or KnownSchemes.GENERIC.value, version_str)
        self._components = split_components(version_str or "")
        if not self._components:
            raise InvalidVersionError(self._scheme, version_str)

    @property
    def components(self) -> Tuple[Component, ...]:
        return self._components

    def is_stable(self) -> bool:
        return True

    def compare_to(self, other: Version) -> int:
        self._check_comparable(other)
        return compare_components(self._components, other._components)
