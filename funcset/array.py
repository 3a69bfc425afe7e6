""" Implements purescript-like Array type in Python.

HashSet.to_array materializes a set's elements into one.
"""
from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import Callable, TypeVar

B = TypeVar('B')

@dataclass(frozen=True)
class Array[A]:
    """
    Represents an immutable array.
    """
    a: tuple[A, ...]

    def __iter__(self):
        """Iterates over the elements of the Array."""
        return iter(self.a)

    def __len__(self):
        return len(self.a)

    def __getitem__(self, index: int) -> A:
        return self.a[index]

    def foldl(self, f: Callable[[B, A], B], acc: B) -> B:
        """
        Left fold over the Array.
        f takes (accumulator, element) and returns the next accumulator.
        """
        return reduce(f, self.a, acc)

    def __repr__(self):
        """String representation of the Array."""
        return f"[{', '.join(map(repr, self.a))}]"
