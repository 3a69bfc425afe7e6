"""Currying helpers."""
from typing import Callable, TypeVar

X = TypeVar('X')
Y = TypeVar('Y')
Z = TypeVar('Z')

def uncurry2(f: Callable[[X], Callable[[Y], Z]]) -> Callable[[X, Y], Z]:
    """Turn a curried function of two arguments back into a binary one."""
    return lambda a, b: f(a)(b)
