"""A single comparator/version pair of a vers range."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote, unquote

from versioning.errors import InvalidRangeError, SchemeMismatchError
from versioning.factory import VersionFactory, default_factory
from versioning.models import Version

from .comparator import PARSE_ORDER, Comparator


@dataclass(frozen=True)
class Constraint:
    """A comparator applied to a version; the wildcard carries no version.

    Constraints order by their version, with the wildcard before any
    versioned constraint.
    """

    scheme: str
    comparator: Comparator
    version: Optional[Version] = None

    def __post_init__(self):
        if not self.scheme:
            raise InvalidRangeError("scheme must not be empty")
        if self.comparator is Comparator.WILDCARD and self.version is not None:
            raise InvalidRangeError(f"comparator {self.comparator.operator} is not allowed with version")
        if self.comparator is not Comparator.WILDCARD and self.version is None:
            raise InvalidRangeError(f"comparator {self.comparator.operator} is not allowed without version")

    @classmethod
    def parse(cls, scheme: str, text: str, factory: Optional[VersionFactory] = None) -> "Constraint":
        """Parse a constraint such as ``>=1.2.3`` or ``1.0`` (equality).

        Args:
            scheme: Versioning scheme of the enclosing range.
            text: Constraint text, optionally percent-encoded.
            factory: Factory used to resolve the version; the default one if omitted.

        Returns:
            Constraint: The parsed constraint.
        """
        if text.strip() == Comparator.WILDCARD.operator:
            return cls.wildcard(scheme)

        comparator = Comparator.EQUAL
        for candidate in PARSE_ORDER:
            if text.startswith(candidate.operator):
                comparator = candidate
                break

        version_str = text[len(comparator.operator):] if comparator is not Comparator.EQUAL else text
        version_str = version_str.strip()
        if not version_str:
            raise InvalidRangeError(
                f'Invalid constraint "{text}": comparator {comparator.operator} is not allowed without version'
            )
        if "%" in version_str:
            version_str = unquote(version_str)

        factory = factory or default_factory()
        return cls(scheme, comparator, factory.for_scheme(scheme, version_str))

    @classmethod
    def wildcard(cls, scheme: str) -> "Constraint":
        return cls(scheme, Comparator.WILDCARD)

    def matches(self, version: Version) -> bool:
        """Return True if ``version`` satisfies this constraint."""
        if version.scheme != self.scheme:
            raise SchemeMismatchError(
                f"cannot evaluate constraint of scheme {self.scheme} against version of scheme {version.scheme}"
            )
        if self.comparator is Comparator.WILDCARD:
            return True

        result = self.version.compare_to(version)
        if self.comparator is Comparator.LESS_THAN:
            return result > 0
        if self.comparator is Comparator.LESS_THAN_OR_EQUAL:
            return result >= 0
        if self.comparator is Comparator.GREATER_THAN_OR_EQUAL:
            return result <= 0
        if self.comparator is Comparator.GREATER_THAN:
            return result < 0
        if self.comparator is Comparator.EQUAL:
            return result == 0
        return result != 0

    def __lt__(self, other: "Constraint") -> bool:
        if not isinstance(other, Constraint):
            return NotImplemented
        if self.version is None:
            return other.version is not None
        if other.version is None:
            return False
        return self.version.compare_to(other.version) < 0

    def __str__(self) -> str:
        if self.comparator is Comparator.WILDCARD:
            return Comparator.WILDCARD.operator
        encoded = quote(str(self.version), safe="")
        if self.comparator is Comparator.EQUAL:
            return encoded
        return self.comparator.operator + encoded
