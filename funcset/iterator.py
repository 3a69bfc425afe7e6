"""Single pass iterator over a snapshot of a HashSet's elements."""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TypeVar

from .maybe import Just, Maybe, Nothing

A = TypeVar("A")


class SetIterator[A](Iterator[A]):
    """
    Owns a private copy of the elements it walks over, so building new
    sets from the source has no effect on a traversal in progress.

    Exhaustion is terminal: `next()` keeps returning Nothing and
    `__next__` keeps raising StopIteration. To start over, ask the set
    for a new iterator.
    """

    __slots__ = ("_items", "_pos")

    def __init__(self, items: Iterable[A]) -> None:
        self._items: tuple[A, ...] = tuple(items)
        self._pos = 0

    def next(self) -> Maybe[A]:
        """Returns Just the next unseen element, or Nothing when spent."""
        if self._pos >= len(self._items):
            return Nothing
        item = self._items[self._pos]
        self._pos += 1
        return Just(item)

    def __next__(self) -> A:
        match self.next():
            case Just(item):
                return item
            case _:
                raise StopIteration

    def __iter__(self) -> SetIterator[A]:
        return self

    def __length_hint__(self) -> int:
        return len(self._items) - self._pos

    def __repr__(self) -> str:
        return f"SetIterator({self._pos}/{len(self._items)})"
