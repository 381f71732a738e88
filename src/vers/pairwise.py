"""Iteration over adjacent pairs of a sequence."""

from __future__ import annotations

from typing import Any, Generic, Iterator, NamedTuple, Optional, Sequence, TypeVar

T = TypeVar("T")


class Pair(NamedTuple):
    left: Any
    right: Optional[Any]


class PairwiseIterator(Generic[T]):
    """Yield ``(items[0], items[1])``, ``(items[1], items[2])``, ...

    Sequences with fewer than two items produce no pairs. The pair produced
    most recently stays available as :attr:`last` once iteration is over.
    """

    def __init__(self, items: Sequence[T]):
        self._items = list(items)
        self._index = 0
        self.last: Optional[Pair] = None

    def __iter__(self) -> Iterator[Pair]:
        return self

    def __next__(self) -> Pair:
        if len(self._items) < 2 or self._index >= len(self._items) - 1:
            raise StopIteration
        left = self._items[self._index]
        right = self._items[self._index + 1]
        self._index += 1
        self.last = Pair(left, right)
        return self.last
