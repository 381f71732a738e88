"""vers ranges: parsing, validation, containment and range arithmetic.

A range is written ``vers:<scheme>/<constraint>|<constraint>|...``; see
https://github.com/package-url/purl-spec/blob/master/VERSION-RANGE-SPEC.rst
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants
from versioning.errors import InvalidRangeError, SchemeMismatchError, VersError
from versioning.factory import VersionFactory, default_factory
from versioning.models import Version

from .comparator import Comparator
from .constraint import Constraint
from .pairwise import PairwiseIterator

logger = logging.getLogger(__name__)

_LOWER_OR_EQUAL = (Comparator.EQUAL, Comparator.GREATER_THAN, Comparator.GREATER_THAN_OR_EQUAL)
_UPPER_OR_EQUAL = (Comparator.EQUAL, Comparator.LESS_THAN, Comparator.LESS_THAN_OR_EQUAL)
_INCLUSIVE = (Comparator.EQUAL, Comparator.LESS_THAN_OR_EQUAL, Comparator.GREATER_THAN_OR_EQUAL)


def _is_lower_bound(constraint: Optional[Constraint]) -> bool:
    return constraint is not None and constraint.comparator.is_lower_bound


def _is_upper_bound(constraint: Optional[Constraint]) -> bool:
    return constraint is not None and constraint.comparator.is_upper_bound


@dataclass(frozen=True)
class Vers:
    """A version range of a single versioning scheme."""

    scheme: str
    constraints: Tuple[Constraint, ...]

    def __post_init__(self):
        if not self.scheme:
            raise InvalidRangeError("versioning scheme must not be empty")
        if not self.constraints:
            raise InvalidRangeError("constraints must not be empty")
        object.__setattr__(self, "constraints", tuple(self.constraints))

    @classmethod
    def parse(cls, text: str, factory: Optional[VersionFactory] = None) -> "Vers":
        """Parse a vers string. The result is not validated.

        Args:
            text: Range such as ``vers:npm/>=1.0.0|<2.0.0``.
            factory: Factory used to resolve versions; the default one if omitted.

        Returns:
            Vers: The parsed range.
        """
        if text is None or not text.strip():
            raise InvalidRangeError("vers string must not be empty")

        uri_scheme, sep, remainder = text.partition(":")
        if not sep:
            raise InvalidRangeError(
                f'Invalid vers string "{text}": expected the format vers:<scheme>/<constraints>'
            )
        if uri_scheme != Constants.URI_SCHEME:
            raise InvalidRangeError(
                f'Invalid vers string "{text}": URI scheme must be "{Constants.URI_SCHEME}", '
                f'but is "{uri_scheme}"'
            )

        scheme, sep, constraints_str = remainder.partition("/")
        if not sep:
            raise InvalidRangeError(
                f'Invalid vers string "{text}": missing versioning scheme separator, '
                "expected the format vers:<scheme>/<constraints>"
            )
        if not scheme.strip():
            raise InvalidRangeError(f'Invalid vers string "{text}": versioning scheme must not be blank')

        constraints_str = constraints_str.strip("|")
        if constraints_str == Comparator.WILDCARD.operator:
            return cls(scheme, (Constraint.wildcard(scheme),))
        if not constraints_str:
            raise InvalidRangeError(f'Invalid vers string "{text}": no constraints')

        factory = factory or default_factory()
        return cls(
            scheme,
            tuple(Constraint.parse(scheme, part, factory) for part in constraints_str.split("|")),
        )

    @staticmethod
    def builder(scheme: str, factory: Optional[VersionFactory] = None) -> "Builder":
        return Builder(scheme, factory)

    @property
    def is_wildcard(self) -> bool:
        return len(self.constraints) == 1 and self.constraints[0].comparator is Comparator.WILDCARD

    def _resolve(self, version: Union[str, Version], factory: Optional[VersionFactory]) -> Version:
        if isinstance(version, Version):
            return version
        return (factory or default_factory()).for_scheme(self.scheme, version)

    def contains(self, version: Union[str, Version], factory: Optional[VersionFactory] = None) -> bool:
        """Return True if ``version`` lies within this range.

        Args:
            version: Version text of this range's scheme, or a resolved version.
            factory: Factory used to resolve ``version`` when given as text.

        Raises:
            SchemeMismatchError: If a resolved version of another scheme is given.
            InvalidRangeError: If the constraints are not in a valid order.
        """
        tested = self._resolve(version, factory)
        if tested.scheme != self.scheme:
            raise SchemeMismatchError(
                f"cannot check version of scheme {tested.scheme} against range of scheme {self.scheme}"
            )

        if len(self.constraints) == 1:
            return self.constraints[0].matches(tested)

        if any(c.comparator in _INCLUSIVE and c.version == tested for c in self.constraints):
            return True
        if any(c.comparator is Comparator.NOT_EQUAL and c.version == tested for c in self.constraints):
            return False

        remaining = [c for c in self.constraints if not c.comparator.is_equality]
        if not remaining:
            return False
        if len(remaining) == 1:
            return remaining[0].matches(tested)

        pairs = PairwiseIterator(remaining)
        for index, (current, following) in enumerate(pairs):
            if index == 0 and _is_upper_bound(current) and tested.compare_to(current.version) < 0:
                return True

            if _is_lower_bound(current) and _is_upper_bound(following):
                if tested.compare_to(current.version) > 0 and tested.compare_to(following.version) < 0:
                    return True
            elif _is_upper_bound(current) and _is_lower_bound(following):
                continue
            else:
                raise InvalidRangeError(f"Invalid range {self}: constraints are in an invalid order")

        last = pairs.last.right if pairs.last else None
        return _is_lower_bound(last) and tested.compare_to(last.version) > 0

    def simplify(self) -> "Vers":
        """Return an equivalent range without redundant constraints."""
        if len(self.constraints) < 2:
            return self

        unequal = [c for c in self.constraints if c.comparator is Comparator.NOT_EQUAL]
        remainder = [c for c in self.constraints if c.comparator is not Comparator.NOT_EQUAL]
        if not remainder:
            return Vers(self.scheme, tuple(unequal))

        index = 0
        while index < len(remainder) - 1:
            current = remainder[index].comparator
            following = remainder[index + 1].comparator

            if current.is_lower_bound and following in _LOWER_OR_EQUAL:
                del remainder[index + 1]

            if current in _UPPER_OR_EQUAL and following.is_upper_bound:
                del remainder[index]
                if index > 0:
                    index -= 1

            if index > 0:
                previous = remainder[index - 1]
                if previous.comparator.is_lower_bound and current in _LOWER_OR_EQUAL:
                    del remainder[index]
                if previous.comparator in _UPPER_OR_EQUAL and current.is_upper_bound:
                    remainder.remove(previous)

            index += 1

        simplified: List[Constraint] = []
        for constraint in remainder + unequal:
            if constraint not in simplified:
                simplified.append(constraint)
        result = Vers(self.scheme, tuple(sorted(simplified)))

        if is_debug_enabled(logger):
            logger.debug(
                "Simplified range",
                extra=extra_context(
                    event="simplify",
                    component="vers",
                    scheme=self.scheme,
                    before=str(self),
                    after=str(result),
                ),
            )
        return result

    def split(self) -> List["Vers"]:
        """Split the simplified range into ranges of at most one bound pair each."""
        ranges: List[Vers] = []
        pair: List[Constraint] = []
        for constraint in self.simplify().constraints:
            if constraint.comparator.is_equality or constraint.comparator is Comparator.WILDCARD:
                ranges.append(Vers(self.scheme, (constraint,)))
            else:
                pair.append(constraint)
            if len(pair) == 2:
                ranges.append(Vers(self.scheme, tuple(pair)))
                pair = []
        if pair:
            ranges.append(Vers(self.scheme, tuple(pair)))
        return ranges

    def validate(self) -> "Vers":
        """Check the ordering rules of the constraints.

        Returns:
            Vers: This range, unchanged.

        Raises:
            InvalidRangeError: If the range breaks any ordering rule.
        """
        if len(self.constraints) > 1 and any(c.comparator is Comparator.WILDCARD for c in self.constraints):
            raise InvalidRangeError(f"Invalid range {self}: wildcard is only allowed with a single constraint")

        constraints = [c for c in self.constraints if c.comparator is not Comparator.NOT_EQUAL]
        if len(constraints) < 2:
            return self

        for current, following in PairwiseIterator(constraints):
            if current.comparator is Comparator.EQUAL and following.comparator not in _LOWER_OR_EQUAL:
                raise InvalidRangeError(
                    f"Invalid range {self}: A = comparator must only be followed by a =, > or >= "
                    f"comparator, but got: {following.comparator.operator}"
                )

        constraints = [c for c in constraints if c.comparator is not Comparator.EQUAL]
        if len(constraints) < 2:
            return self

        for current, following in PairwiseIterator(constraints):
            if current.comparator.is_upper_bound and not following.comparator.is_lower_bound:
                raise InvalidRangeError(
                    f"Invalid range {self}: A < or <= comparator must only be followed by a > or >= "
                    f"comparator, but got: {following.comparator.operator}"
                )
            if current.comparator.is_lower_bound and not following.comparator.is_upper_bound:
                raise InvalidRangeError(
                    f"Invalid range {self}: A > or >= comparator must only be followed by a < or <= "
                    f"comparator, but got: {following.comparator.operator}"
                )
        return self

    def overlaps_with(self, other: "Vers") -> bool:
        """Return True if some version could lie in both ranges.

        Raises:
            SchemeMismatchError: If the ranges use different schemes.
        """
        if self.scheme != other.scheme:
            raise SchemeMismatchError(
                f"Vers ranges with different schemes cannot be checked for an overlap: "
                f"{self.scheme} and {other.scheme}"
            )
        if self.is_wildcard or other.is_wildcard:
            return True

        if _is_part_of(self, other) or _is_part_of(other, self):
            return True

        bounds_a = [c for c in self.constraints if not c.comparator.is_equality]
        bounds_b = [c for c in other.constraints if not c.comparator.is_equality]
        if not bounds_a or not bounds_b:
            return False

        range_a = Vers(self.scheme, tuple(bounds_a)).simplify()
        range_b = Vers(other.scheme, tuple(bounds_b)).simplify()

        if _overlaps_unbounded(range_a, range_b) or _overlaps_unbounded(range_b, range_a):
            return True

        bounded_a = remove_unbounded_constraints(range_a)
        bounded_b = remove_unbounded_constraints(range_b)
        if not bounded_a or not bounded_b:
            return False
        if len(bounded_a) % 2 != 0 or len(bounded_b) % 2 != 0:
            raise InvalidRangeError(
                f"Cannot check {self} and {other} for an overlap: bounds do not form lower/upper pairs"
            )

        for i in range(0, len(bounded_a), 2):
            for j in range(0, len(bounded_b), 2):
                if _bounds_overlap(
                    bounded_a[i].version,
                    bounded_a[i + 1].version,
                    bounded_b[j].version,
                    bounded_b[j + 1].version,
                ):
                    return True
        return False

    def __str__(self) -> str:
        return f"{Constants.URI_SCHEME}:{self.scheme.lower()}/" + "|".join(str(c) for c in self.constraints)


def _is_part_of(range_a: Vers, range_b: Vers) -> bool:
    return any(
        range_b.contains(c.version) for c in range_a.constraints if c.comparator in _INCLUSIVE
    )


def _overlaps_unbounded(range_a: Vers, range_b: Vers) -> bool:
    first = range_a.constraints[0]
    if _is_upper_bound(first) and any(
        first.version.compare_to(c.version) > 0 for c in range_b.constraints
    ):
        return True
    last = range_a.constraints[-1]
    return _is_lower_bound(last) and any(
        last.version.compare_to(c.version) < 0 for c in range_b.constraints
    )


def _bounds_overlap(lower_a: Version, upper_a: Version, lower_b: Version, upper_b: Version) -> bool:
    return lower_a.compare_to(upper_b) < 0 and lower_b.compare_to(upper_a) < 0


def remove_unbounded_constraints(vers: Vers) -> List[Constraint]:
    """Drop a leading upper bound and a trailing lower bound."""
    constraints = list(vers.constraints)
    if constraints and _is_upper_bound(constraints[0]):
        first = constraints[0]
        constraints = [c for c in constraints if c != first]
    if constraints and _is_lower_bound(constraints[-1]):
        last = constraints[-1]
        constraints = [c for c in constraints if c != last]
    return constraints


class Builder:
    """Collects constraints and produces a sorted, validated range."""

    def __init__(self, scheme: str, factory: Optional[VersionFactory] = None):
        self._scheme = scheme
        self._factory = factory or default_factory()
        self._constraints: List[Constraint] = []

    @property
    def scheme(self) -> str:
        return self._scheme

    def create_constraint(self, comparator: Comparator, version_str: Optional[str]) -> Constraint:
        version = None if version_str is None else self._factory.for_scheme(self._scheme, version_str)
        return Constraint(self._scheme, comparator, version)

    def parse_constraint(self, text: str) -> Constraint:
        return Constraint.parse(self._scheme, text, self._factory)

    def with_constraint(
        self,
        constraint: Union[Constraint, Comparator, str],
        version_str: Optional[str] = None,
    ) -> "Builder":
        """Add a constraint.

        Accepts a :class:`Constraint`, a :class:`Comparator` with version text
        (``None`` for the wildcard), or constraint text such as ``>=1.0``.
        """
        if constraint is None:
            raise InvalidRangeError("constraint must not be None")
        if isinstance(constraint, Constraint):
            self._constraints.append(constraint)
        elif isinstance(constraint, Comparator):
            self._constraints.append(self.create_constraint(constraint, version_str))
        else:
            self._constraints.append(self.parse_constraint(constraint))
        return self

    def has_constraints(self) -> bool:
        return bool(self._constraints)

    def build(self) -> Vers:
        """Sort the collected constraints by version and validate the range.

        Raises:
            VersError: If the range cannot be built.
        """
        if not self._scheme:
            raise InvalidRangeError("scheme must not be empty")
        if not self._constraints:
            raise InvalidRangeError("constraints must not be empty")
        if any(c.scheme != self._scheme for c in self._constraints):
            raise SchemeMismatchError(f"constraints must have identical versioning schemes ({self._scheme})")
        return Vers(self._scheme, tuple(sorted(self._constraints))).validate()

    def maybe_build(self) -> Optional[Vers]:
        """Like :meth:`build`, but return None instead of raising."""
        try:
            return self.build()
        except VersError as exc:
            if is_debug_enabled(logger):
                logger.debug(
                    "Discarding invalid range",
                    extra=extra_context(
                        event="build",
                        component="vers",
                        outcome="invalid",
                        scheme=self._scheme,
                        error=str(exc),
                    ),
                )
            return None

