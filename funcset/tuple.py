"""
This module defines the Tuple pair type.

HashSet.partition returns its two halves as a Tuple, which unpacks
like a builtin pair: `yes, no = s.partition(p)`.
"""
from typing import Iterator, TypeVar
from dataclasses import dataclass

A = TypeVar('A')
L = TypeVar('L')


@dataclass(frozen=True)
class Tuple[L,A]:
    """An immutable pair."""

    fst: L
    snd: A

    def __len__(self) -> int:
        return 2

    def __iter__(self) -> Iterator[L | A]:
        yield self.fst
        yield self.snd

    def __getitem__(self, index: int):
        """Allows indexing into the Tuple."""
        match index:
            case 0: return self.fst
            case 1: return self.snd
            case _: raise IndexError("Tuple index out of range")

    def __repr__(self):
        """String representation of the Tuple."""
        return f'Tuple ({self.fst!r}, {self.snd!r})'
