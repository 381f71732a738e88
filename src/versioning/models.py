"""Data models for versions and version providers."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, FrozenSet

from constants import Constants

from .errors import SchemeMismatchError


class Version(ABC):
    """A version of some versioning scheme.

    Instances are immutable. Two versions are equal when they share the same
    scheme and compare as equal; the original text is kept for display only.
    """

    def __init__(self, scheme: str, version_str: str):
        self._scheme = scheme
        self._version_str = version_str

    @property
    def scheme(self) -> str:
        """Versioning scheme this version belongs to."""
        return self._scheme

    @abstractmethod
    def compare_to(self, other: "Version") -> int:
        """Compare with another version of the same scheme.

        Returns:
            A negative number, zero or a positive number when this version is
            lower than, equal to or higher than ``other``.

        Raises:
            SchemeMismatchError: If ``other`` is of a different concrete type.
        """

    @abstractmethod
    def is_stable(self) -> bool:
        """Return True when this is a stable release for its scheme."""

    def _check_comparable(self, other: "Version") -> None:
        if type(other) is not type(self):
            raise SchemeMismatchError(
                f"{type(self).__name__} can only be compared with its own type, "
                f"but got {type(other).__name__}"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        if self._scheme != other._scheme:
            return False
        return self.compare_to(other) == 0

    def __hash__(self) -> int:
        # compare_to may treat different strings as equal, so only hash what equality requires
        return hash((self._scheme, type(self).__name__))

    def __lt__(self, other: "Version") -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: "Version") -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: "Version") -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: "Version") -> bool:
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return self._version_str

    def __repr__(self) -> str:
        return f"{type(self).__name__}(scheme={self._scheme!r}, version={self._version_str!r})"


@dataclass(frozen=True)
class VersionProvider:
    """Registry entry mapping schemes to a version constructor.

    The constructor is called with ``(scheme, version_str)``.
    """

    schemes: FrozenSet[str]
    constructor: Callable[[str, str], Version]
    priority: int = Constants.PRIORITY_BUILTIN
    name: str = ""

    def supports_scheme(self, scheme: str) -> bool:
        """Return True if this provider handles ``scheme``."""
        return scheme in self.schemes

    def get_version(self, scheme: str, version_str: str) -> Version:
        """Construct a version of ``scheme`` from ``version_str``."""
        return self.constructor(scheme, version_str)


PRIORITY_LOWEST = Constants.PRIORITY_LOWEST
PRIORITY_BUILTIN = Constants.PRIORITY_BUILTIN
PRIORITY_HIGHEST = sys.maxsize
