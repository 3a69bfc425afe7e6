# pylint:disable=W2301
"""Monoid protocol.

A monoid is a semigroup with an identity element:

    1. Closure: If 'a' and 'b' are in S, then 'a.append(b)' is also in S.
    2. Identity: There exists an element mempty() in S such that
       a.append(mempty()) == a == mempty().append(a)
    3. Associativity: (a + b) + c = a + (b + c)

Example:
    HashSet.mempty().append(HashSet.of(1, 2))   # HashSet({1, 2})
    mconcat([HashSet.of(1), HashSet.of(2)])     # HashSet({1, 2})
"""

from typing import (
    Iterable,
    Protocol,
    Self,
)

from .semigroup import Semigroup


class Monoid(Semigroup, Protocol):
    """Protocol for Monoid instances.

    Implementations provide the `mempty` classmethod in addition to
    `append`, ensuring that the identity and associativity laws hold.
    """

    @classmethod
    def mempty(cls) -> Self:
        """Returns the identity element for this Monoid."""
        ...


def mconcat[M: Monoid](monoid_list: Iterable[M]) -> M:
    """Takes a list of monoid values and reduces them to a single value
    by applying the append operation to all elements of the list.
    Needs a non empty list, because there is no type to call mempty on.
    """
    it = iter(monoid_list)
    try:
        result = next(it)
    except StopIteration:
        raise ValueError("mconcat needs at least one value") from None
    for value in it:
        result = result.append(value)
    return result
