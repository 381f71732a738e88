"""Comparison operators of a vers constraint."""

from __future__ import annotations

from enum import Enum


class Comparator(Enum):
    """Constraint comparators.

    Args:
        Enum (string): Operator glyph as written in a vers string.
    """

    LESS_THAN_OR_EQUAL = "<="
    LESS_THAN = "<"
    EQUAL = "="
    NOT_EQUAL = "!="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    WILDCARD = "*"

    @property
    def operator(self) -> str:
        return self.value

    @property
    def is_lower_bound(self) -> bool:
        return self in (Comparator.GREATER_THAN, Comparator.GREATER_THAN_OR_EQUAL)

    @property
    def is_upper_bound(self) -> bool:
        return self in (Comparator.LESS_THAN, Comparator.LESS_THAN_OR_EQUAL)

    @property
    def is_equality(self) -> bool:
        return self in (Comparator.EQUAL, Comparator.NOT_EQUAL)


# Operator prefixes in the order they have to be tried when parsing.
PARSE_ORDER = (
    Comparator.LESS_THAN_OR_EQUAL,
    Comparator.GREATER_THAN_OR_EQUAL,
    Comparator.NOT_EQUAL,
    Comparator.LESS_THAN,
    Comparator.GREATER_THAN,
)
