"""Maven artifact versions.

Ordering is a port of Maven's ``ComparableVersion``. A version is parsed into
a tree of integer, string and list items; a ``-`` opens a nested list, and a
transition between digits and letters is treated like a ``-``.
"""

from __future__ import annotations

import re
from typing import List, Optional, Union

from constants import KnownSchemes

from ..errors import InvalidVersionError
from ..models import Version

_QUALIFIERS = ["alpha", "beta", "milestone", "rc", "snapshot", "", "sp"]
_ALIASES = {"ga": "", "final": "", "release": "", "cr": "rc"}
_RELEASE_VERSION_INDEX = str(_QUALIFIERS.index(""))

_UNSTABLE_QUALIFIER_RE = re.compile(
    r"^(snapshot|rc\d*|cr\d*|alpha\.?\d*|a\d+|beta\.?\d*|b\d+|m\.?\d*|milestone\.?\d*)$",
    re.IGNORECASE,
)


def _comparable_qualifier(qualifier: str) -> str:
    if qualifier in _QUALIFIERS:
        return str(_QUALIFIERS.index(qualifier))
    return f"{len(_QUALIFIERS)}-{qualifier}"


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


class IntItem:
    def __init__(self, value: int):
        self.value = value

    def is_null(self) -> bool:
        return self.value == 0

    def compare_to(self, item: Optional["Item"]) -> int:
        if item is None:
            return 0 if self.value == 0 else 1
        if isinstance(item, IntItem):
            return _cmp(self.value, item.value)
        return 1

    def __repr__(self) -> str:
        return str(self.value)


class StringItem:
    def __init__(self, value: str, followed_by_digit: bool):
        if followed_by_digit and len(value) == 1:
            # a1 = alpha-1, b1 = beta-1, m1 = milestone-1
            value = {"a": "alpha", "b": "beta", "m": "milestone"}.get(value, value)
        self.value = _ALIASES.get(value, value)

    def is_null(self) -> bool:
        return _comparable_qualifier(self.value) == _RELEASE_VERSION_INDEX

    def compare_to(self, item: Optional["Item"]) -> int:
        if item is None:
            return _cmp(_comparable_qualifier(self.value), _RELEASE_VERSION_INDEX)
        if isinstance(item, StringItem):
            return _cmp(_comparable_qualifier(self.value), _comparable_qualifier(item.value))
        return -1

    def __repr__(self) -> str:
        return self.value


class ListItem(list):
    def is_null(self) -> bool:
        return len(self) == 0

    def normalize(self) -> None:
        for i in range(len(self) - 1, -1, -1):
            last = self[i]
            if last.is_null():
                del self[i]
            elif not isinstance(last, ListItem):
                break

    def compare_to(self, item: Optional["Item"]) -> int:
        if item is None:
            for child in self:
                result = child.compare_to(None)
                if result != 0:
                    return result
            return 0
        if isinstance(item, IntItem):
            return -1
        if isinstance(item, StringItem):
            return 1
        for i in range(max(len(self), len(item))):
            left = self[i] if i < len(self) else None
            right = item[i] if i < len(item) else None
            if left is None:
                result = 0 if right is None else -right.compare_to(None)
            else:
                result = left.compare_to(right)
            if result != 0:
                return result
        return 0

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(child) for child in self) + "]"


Item = Union[IntItem, StringItem, ListItem]


def _parse_item(is_digit: bool, text: str) -> Item:
    if is_digit:
        return IntItem(int(text))
    return StringItem(text, False)


def parse_version(version_str: str) -> ListItem:
    """Parse a Maven version into its normalized item tree."""
    text = version_str.lower()
    items = ListItem()
    current = items
    stack: List[ListItem] = [items]
    is_digit = False
    start = 0

    def push_list() -> None:
        nonlocal current
        nested = ListItem()
        current.append(nested)
        current = nested
        stack.append(nested)

    for i, char in enumerate(text):
        if char == ".":
            current.append(IntItem(0) if i == start else _parse_item(is_digit, text[start:i]))
            start = i + 1
        elif char == "-":
            current.append(IntItem(0) if i == start else _parse_item(is_digit, text[start:i]))
            start = i + 1
            push_list()
        elif "0" <= char <= "9":
            if not is_digit and i > start:
                current.append(StringItem(text[start:i], True))
                start = i
                push_list()
            is_digit = True
        else:
            if is_digit and i > start:
                current.append(_parse_item(True, text[start:i]))
                start = i
                push_list()
            is_digit = False

    if len(text) > start:
        current.append(_parse_item(is_digit, text[start:]))

    while stack:
        stack.pop().normalize()
    return items


def _qualifier(version_str: str) -> Optional[str]:
    if "-" in version_str:
        return version_str.split("-", 1)[1]
    for segment in version_str.split("."):
        if not segment.isdigit():
            return segment
    return None


class MavenVersion(Version):
    """A Maven version."""

    def __init__(self, version_str: str):
        super().__init__(KnownSchemes.MAVEN.value, version_str)
        if not version_str or not version_str.strip():
            raise InvalidVersionError(KnownSchemes.MAVEN.value, version_str, "Maven version must not be blank")
        self._items = parse_version(version_str.strip())

    @property
    def qualifier(self) -> Optional[str]:
        return _qualifier(self._version_str.strip())

    def is_stable(self) -> bool:
        qualifier = self.qualifier
        if qualifier is None:
            return True
        return _UNSTABLE_QUALIFIER_RE.match(qualifier) is None

    def compare_to(self, other: Version) -> int:
        self._check_comparable(other)
        return self._items.compare_to(other._items)
