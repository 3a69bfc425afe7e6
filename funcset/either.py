"""
Implementation of Either.

Left carries a recoverable error, Right a successful result.
HashSet.try_from_iterable reports unhashable input this way.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TypeVar

L = TypeVar("L")
R = TypeVar("R")

type Either[L,R] = 'Left[L]' | 'Right[R]'

@dataclass(frozen=True)
class Left[L]:
    """
    Represents a left (error) value in an Either type.
    """
    l: L

    def __repr__(self):
        """String representation of the Left."""
        return f"Left({self.l!r})"

@dataclass(frozen=True)
class Right[R]:
    """
    Represents a right (success) value in an Either type.
    """
    r: R

    def __repr__(self):
        """String representation of the Right."""
        return f"Right({self.r!r})"
