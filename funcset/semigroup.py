"""
Semigroup protocol.

HashSet is a semigroup under union and Array under concatenation.
"""

from typing import Protocol, Self


class Semigroup(Protocol):
    """Protocol for Semigroup instances.

    Implementations provide `append`, which must be closed over the type
    and associative:

        a.append(b).append(c) == a.append(b.append(c))
    """

    def append(self, other: Self) -> Self:
        """Combines two Semigroup instances."""
        ...
