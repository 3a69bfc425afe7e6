from dataclasses import dataclass, field

import pytest

from funcset import HashSet, reset_config


@pytest.fixture(autouse=True)
def default_config():
    reset_config()
    yield
    reset_config()


@dataclass(frozen=True)
class Tagged:
    """Equal and hash-equal on key only; tag tells equal values apart."""
    key: int
    tag: str = field(compare=False)


class Colliding:
    """Every instance hashes alike; equality is by value."""

    def __init__(self, value):
        self.value = value

    def __hash__(self):
        return 7

    def __eq__(self, other):
        return isinstance(other, Colliding) and self.value == other.value

    def __repr__(self):
        return f"Colliding({self.value})"


@pytest.fixture
def s():
    return HashSet.of(1, 2, 3)


@pytest.fixture
def t():
    return HashSet.of(2, 3, 4)
