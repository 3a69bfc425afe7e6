""" Implementation of Maybe in Python.

HashSet uses Maybe wherever a query may come back empty:
`member`, `any`, and `SetIterator.next`.
"""
from enum import Enum
from dataclasses import dataclass
from typing import TypeVar

A = TypeVar("A")

type Maybe[A] = Just[A] | _Nothing


class _Nothing(Enum):
    NOTHING = "Nothing"

    def __bool__(self) -> bool:
        return False

    def __repr__(self):
        """String representation of Nothing."""
        return "Nothing"

# singleton instance
Nothing: _Nothing = _Nothing.NOTHING

@dataclass(frozen=True)
class Just[A]:
    """A present value."""
    a: A

    def __repr__(self):
        """String representation of the Just."""
        return f"Just({self.a!r})"

    def __eq__(self, other) -> bool:
        """Equality check for Just."""
        return isinstance(other, Just) and self.a == other.a

    def __hash__(self) -> int:
        return hash(self.a)
