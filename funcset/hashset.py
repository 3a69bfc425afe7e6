"""Implements a purescript-like immutable HashSet type in Python.

Uniqueness follows the elements' own __hash__ and __eq__. Every
operation that looks like it changes a set returns a new HashSet built
through `from_iterable`; no method mutates an existing one.

The iteration order of a HashSet is unspecified. Code that needs a
deterministic result from `reduce` must pass an order-independent
(commutative and associative in effect) function.

Elements whose __eq__ and __hash__ disagree (equal elements with
different hashes) break deduplication silently. This is not checked.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Self, TypeVar

from .array import Array
from .config import Selection, get_config, get_rng
from .curry import uncurry2
from .either import Either, Left, Right
from .functor import Functor
from .iterator import SetIterator
from .maybe import Just, Maybe, Nothing
from .monoid import Monoid
from .tuple import Tuple

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")


class SetError(str, Enum):
    """HashSet error enumeration"""
    UNHASHABLE_ELEMENT = "HashSet elements must be hashable"


def _require_set(other, operation: str) -> HashSet:
    if not isinstance(other, HashSet):
        raise TypeError(
            f"HashSet.{operation} expects a HashSet, got {type(other).__name__}")
    return other


@dataclass(frozen=True)
class HashSet[A](Functor[A], Monoid):
    """
    Represents an immutable HashSet backed by a Python dict.

    Each key maps to the stored representative of its equivalence class,
    which is the last equal element seen while the set was built. Build
    instances with `empty`, `of` or `from_iterable` rather than by hand.
    """

    data: dict[A, A]

    # construction

    @classmethod
    def empty(cls) -> HashSet[A]:
        """Creates an empty HashSet."""
        return cls({})

    @classmethod
    def mempty(cls) -> HashSet[A]:
        """Identity of union, for the Monoid instance."""
        return cls.empty()

    @classmethod
    def from_iterable(cls, elements: Iterable[A]) -> HashSet[A]:
        """
        Creates a HashSet from any finite iterable, scanning it once.
        When elements are equal the later one becomes the representative.
        """
        data: dict[A, A] = {}
        scanned = 0
        for x in elements:
            data[x] = x
            scanned += 1
        if scanned != len(data):
            logger.debug("collapsed %d duplicate element(s) into a set of %d",
                         scanned - len(data), len(data))
        return cls(data)

    @classmethod
    def from_array(cls, arr: Array[A]) -> HashSet[A]:
        """Creates a HashSet from a purescript-like Array."""
        return cls.from_iterable(arr)

    @classmethod
    def of(cls, *elements: A) -> HashSet[A]:
        """Creates a HashSet from its arguments: HashSet.of(1, 2, 3)."""
        return cls.from_iterable(elements)

    @classmethod
    def try_from_iterable(cls, elements: Iterable[A]) \
        -> Either[SetError, HashSet[A]]:
        """
        Like from_iterable, but an unhashable element yields
        Left(SetError.UNHASHABLE_ELEMENT) instead of raising TypeError.
        A TypeError from iterating elements itself still propagates.
        """
        items = list(elements)
        for x in items:
            try:
                hash(x)
            except TypeError as exc:
                logger.warning("could not build HashSet: %s", exc)
                return Left(SetError.UNHASHABLE_ELEMENT)
        return Right(cls.from_iterable(items))

    # queries

    @property
    def count(self) -> int:
        """Returns the number of distinct elements."""
        return len(self.data)

    def __len__(self) -> int:
        """Returns the number of elements in the HashSet."""
        return len(self.data)

    def to_array(self) -> Array[A]:
        """Returns all elements in an Array, in no particular order."""
        return Array(tuple(self.data.values()))

    def to_list(self) -> list[A]:
        """Returns all elements in a new Python list, in no particular order."""
        return list(self.data.values())

    def contains(self, item: A) -> bool:
        """Returns True if an element equal to item is in the HashSet."""
        return item in self.data

    def __contains__(self, item: A) -> bool:
        """Allows use of `item in my_hashset`."""
        return item in self.data

    def member(self, item: A) -> Maybe[A]:
        """
        Returns Just the stored element equal to item, or Nothing.
        The stored representative may differ from item in fields that
        take no part in equality.
        """
        if item in self.data:
            return Just(self.data[item])
        return Nothing

    def any(self) -> Maybe[A]:
        """
        Returns Just some element of the HashSet, or Nothing if empty.
        Which one is governed by the configured Selection policy.
        """
        if not self.data:
            return Nothing
        match get_config().selection:
            case Selection.FIRST:
                return Just(next(iter(self.data.values())))
            case _:
                return Just(get_rng().choice(self.to_array().a))

    # set algebra

    def is_subset_of(self, other: HashSet[A]) -> bool:
        """
        Returns True if every element of this set is also in other.
        """
        other = _require_set(other, "is_subset_of")
        found = 0
        for x in self.data:
            if x in other.data:
                found += 1
        return found == self.count

    # Reads as "other contains all of self"; kept for callers that know
    # the operation under this name.
    contains_all = is_subset_of

    def __le__(self, other) -> bool:
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.is_subset_of(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, HashSet):
            return NotImplemented
        return other.is_subset_of(self)

    def intersects(self, other: HashSet[A]) -> bool:
        """Returns True if the two sets share at least one element."""
        other = _require_set(other, "intersects")
        for x in other.data:
            if x in self.data:
                return True
        return False

    def intersect(self, other: HashSet[A]) -> HashSet[A]:
        """
        Elements of this set that are also in other. The representatives
        in the result are the ones stored in other.
        """
        other = _require_set(other, "intersect")
        found: list[A] = []
        for x in self.data.values():
            match other.member(x):
                case Just(memb):
                    found.append(memb)
        return self.from_iterable(found)

    def __and__(self, other) -> HashSet[A]:
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.intersect(other)

    def minus(self, other: HashSet[A]) -> HashSet[A]:
        """Elements of this set that are not in other."""
        other = _require_set(other, "minus")
        return self.from_iterable(
            x for x in self.data.values() if x not in other.data)

    def __sub__(self, other) -> HashSet[A]:
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.minus(other)

    def union(self, other: HashSet[A]) -> HashSet[A]:
        """
        All elements of both sets. Where the two hold equal elements,
        other's representative is kept.
        """
        other = _require_set(other, "union")
        return self.from_iterable(
            (*self.data.values(), *other.data.values()))

    def append(self, other: HashSet[A]) -> HashSet[A]:
        """Union, for the Semigroup instance."""
        return self.union(other)

    def __or__(self, other) -> HashSet[A]:
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.union(other)

    def add(self: Self, item: A) -> Self:
        """
        Returns a HashSet that also holds item.
        If an equal element is already present the receiver is returned.
        """
        if item in self.data:
            logger.debug("add: %r already present", item)
            return self
        return self.from_iterable((*self.data.values(), item))

    def remove(self: Self, item: A) -> Self:
        """
        Returns a HashSet without the elements equal to item.
        If there are none the receiver is returned. Elements that merely
        share item's hash are kept.
        """
        if item not in self.data:
            logger.debug("remove: %r not present", item)
            return self
        return self.from_iterable(
            x for x in self.data.values() if not (x is item or x == item))

    # functional combinators

    def filter(self, predicate: Callable[[A], bool]) -> HashSet[A]:
        """Returns the set of elements that satisfy predicate."""
        return self.from_iterable(x for x in self.data.values() if predicate(x))

    def partition(self, predicate: Callable[[A], bool]) \
        -> Tuple[HashSet[A], HashSet[A]]:
        """
        Splits the set in two: the elements that satisfy predicate and
        the elements that don't.
        """
        satisfied: list[A] = []
        rest: list[A] = []
        for x in self.data.values():
            if predicate(x):
                satisfied.append(x)
            else:
                rest.append(x)
        return Tuple(self.from_iterable(satisfied), self.from_iterable(rest))

    def __rand__(self, other: Callable[[A], B]) -> HashSet[B]:
        """Defines the right-hand side of the map operation."""
        if not callable(other):
            return NotImplemented
        return self.map(other)

    def map(self, f: Callable[[A], B]) -> HashSet[B]:
        """
        Applies f to every element and collects the results in a new set.
        Results that compare equal collapse into one.
        """
        return HashSet.from_iterable(f(x) for x in self.data.values())

    def reduce(self, f: Callable[[B, A], B], initial: B) -> B:
        """
        Folds the elements into a single value with f(acc, element).
        Elements arrive in no particular order.
        """
        return self.to_array().foldl(f, initial)

    def reduce_curried(self, f: Callable[[B], Callable[[A], B]], initial: B) -> B:
        """Same as reduce, for a curried f(acc)(element)."""
        return self.reduce(uncurry2(f), initial)

    # iteration

    def make_iterator(self) -> SetIterator[A]:
        """Returns a fresh iterator over a snapshot of the elements."""
        return SetIterator(self.data.values())

    def __iter__(self) -> SetIterator[A]:
        """Iterates over the elements of the HashSet."""
        return self.make_iterator()

    # equality and display

    def equals(self, other: HashSet[A]) -> bool:
        """True if each set is a subset of the other."""
        other = _require_set(other, "equals")
        return self.is_subset_of(other) and other.is_subset_of(self)

    def __eq__(self, other) -> bool:
        """Equality check for HashSet."""
        return isinstance(other, HashSet) and self.equals(other)

    def __hash__(self) -> int:
        return hash(frozenset(self.data))

    def __repr__(self) -> str:
        """String representation of the HashSet."""
        shown = [repr(x) for x in self.data.values()]
        limit = get_config().display_limit
        if limit is not None and len(shown) > limit:
            shown = shown[:limit] + ["..."]
        return f"HashSet({{{', '.join(shown)}}})"
