import logging

import pytest

from funcset import Array, HashSet, Just, Left, Nothing, Right, SetError, Tuple, map
from tests.conftest import Colliding, Tagged


def test_empty():
    e = HashSet.empty()
    assert e.count == 0
    assert len(e) == 0
    assert e.any() == Nothing
    assert e.to_array() == Array(())
    assert HashSet.mempty() == e


def test_dedup():
    assert HashSet.of("a", "a", "b").count == 2
    assert HashSet.from_iterable([1, 1, 1]).count == 1
    assert HashSet.from_iterable(range(5)).count == 5


def test_from_iterable_scans_generators_once():
    s = HashSet.from_iterable(x % 3 for x in range(10))
    assert s == HashSet.of(0, 1, 2)


def test_from_array():
    assert HashSet.from_array(Array((3, 1, 3))) == HashSet.of(1, 3)


def test_last_write_wins():
    x = Tagged(1, "first")
    y = Tagged(1, "second")
    s = HashSet.from_iterable([x, y])
    assert s.count == 1
    assert s.member(x).a is y
    assert s.to_list()[0] is y


def test_duplicates_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="funcset"):
        HashSet.of(1, 1, 2)
    assert "collapsed 1 duplicate element(s) into a set of 2" in caplog.text


def test_try_from_iterable():
    assert HashSet.try_from_iterable([1, 2]) == Right(HashSet.of(1, 2))


def test_try_from_iterable_unhashable(caplog):
    with caplog.at_level(logging.WARNING, logger="funcset"):
        result = HashSet.try_from_iterable([[1], [2]])
    assert result == Left(SetError.UNHASHABLE_ELEMENT)
    assert "could not build HashSet" in caplog.text


def test_unhashable_raises():
    with pytest.raises(TypeError):
        HashSet.of({"a": 1})


def test_contains_and_member(s):
    assert s.contains(2)
    assert 3 in s
    assert not s.contains(9)
    assert s.member(1) == Just(1)
    assert s.member(9) == Nothing


def test_to_array_and_list(s):
    assert sorted(s.to_array()) == [1, 2, 3]
    assert sorted(s.to_list()) == [1, 2, 3]


def test_any_returns_a_present_element(s):
    for _ in range(20):
        assert s.any().a in s


def test_concrete_scenario(s, t):
    assert s.union(t) == HashSet.of(1, 2, 3, 4)
    assert s.intersect(t) == HashSet.of(2, 3)
    assert s.minus(t) == HashSet.of(1)
    assert not s.equals(t)
    assert not s.contains_all(t)
    assert not t.contains_all(s)
    assert s.intersects(t)


def test_operators(s, t):
    assert s | t == HashSet.of(1, 2, 3, 4)
    assert s & t == HashSet.of(2, 3)
    assert s - t == HashSet.of(1)
    assert HashSet.of(2) <= s
    assert s >= HashSet.of(2, 3)
    assert not s <= t


def test_is_subset_of_reads_self_in_other():
    small = HashSet.of(1)
    big = HashSet.of(1, 2)
    assert small.is_subset_of(big)
    assert small.contains_all(big)
    assert not big.is_subset_of(small)
    assert HashSet.empty().is_subset_of(small)


def test_union_contains_both(s, t):
    u = s.union(t)
    assert s.is_subset_of(u)
    assert t.is_subset_of(u)


def test_union_prefers_other_representative():
    left = HashSet.of(Tagged(1, "left"), Tagged(2, "left"))
    right = HashSet.of(Tagged(1, "right"))
    assert left.union(right).member(Tagged(1, "")).a.tag == "right"
    assert left.union(right).member(Tagged(2, "")).a.tag == "left"


def test_intersect_takes_representatives_from_other():
    mine = HashSet.of(Tagged(1, "mine"), Tagged(2, "mine"))
    theirs = HashSet.of(Tagged(1, "theirs"))
    both = mine.intersect(theirs)
    assert both.count == 1
    assert both.any().a.tag == "theirs"


def test_minus_intersect_partition(s, t):
    outside = s.minus(t)
    inside = s.intersect(t)
    assert outside.union(inside) == s
    assert outside.intersect(inside).count == 0
    assert not outside.intersects(inside)


def test_intersects_disjoint():
    assert not HashSet.of(1, 2).intersects(HashSet.of(3))
    assert not HashSet.empty().intersects(HashSet.of(3))


def test_empty_union_is_identity(s):
    assert HashSet.empty().union(s).equals(s)
    assert s.union(HashSet.empty()).equals(s)


def test_algebra_rejects_other_types(s):
    with pytest.raises(TypeError, match="expects a HashSet"):
        s.union({1, 2})
    with pytest.raises(TypeError):
        s.is_subset_of([1, 2, 3])
    with pytest.raises(TypeError):
        _ = s | {4}


def test_add(s):
    assert s.add(4) == HashSet.of(1, 2, 3, 4)
    assert s.add(2) is s
    assert s == HashSet.of(1, 2, 3)


def test_remove(s):
    assert s.remove(2) == HashSet.of(1, 3)
    assert s.remove(9) is s
    assert s.count == 3


def test_remove_keeps_hash_colliders():
    a, b, c = Colliding("a"), Colliding("b"), Colliding("c")
    s = HashSet.of(a, b, c)
    assert s.count == 3
    removed = s.remove(Colliding("b"))
    assert removed.count == 2
    assert a in removed and c in removed
    assert b not in removed


def test_filter(s):
    assert s.filter(lambda x: x > 1) == HashSet.of(2, 3)
    assert s.filter(lambda x: x > 5) == HashSet.empty()


def test_partition_covers(s):
    yes, no = s.partition(lambda x: x % 2 == 1)
    assert yes == HashSet.of(1, 3)
    assert no == HashSet.of(2)
    assert yes.union(no).equals(s)
    assert not yes.intersects(no)
    assert isinstance(s.partition(bool), Tuple)


def test_map_collapses_images(s):
    assert s.map(lambda x: x * 10) == HashSet.of(10, 20, 30)
    assert s.map(lambda x: x % 2) == HashSet.of(0, 1)
    assert (lambda x: x + 1) & s == HashSet.of(2, 3, 4)
    assert map(str, s) == HashSet.of("1", "2", "3")


def test_reduce(s):
    assert s.reduce(lambda acc, x: acc + x, 0) == 6
    assert s.reduce_curried(lambda acc: lambda x: acc * x, 1) == 6
    assert HashSet.empty().reduce(lambda acc, x: acc + x, 42) == 42


def test_equality_is_order_independent():
    assert HashSet.of("a", "b", "c").equals(HashSet.of("c", "b", "a"))
    assert HashSet.of("a", "b", "c") == HashSet.of("c", "b", "a")
    assert HashSet.of(1) != HashSet.of(2)
    assert HashSet.of(1) != {1}


def test_hash_is_consistent_with_equality():
    assert hash(HashSet.of(1, 2)) == hash(HashSet.of(2, 1))
    nested = HashSet.of(HashSet.of(1, 2), HashSet.of(2, 1), HashSet.of(3))
    assert nested.count == 2


def test_operations_do_not_mutate(s, t):
    before = dict(s.data)
    s.union(t)
    s.minus(t)
    s.intersect(t)
    s.add(9)
    s.remove(1)
    s.filter(bool)
    s.map(str)
    assert s.data == before


def test_frozen(s):
    with pytest.raises(AttributeError):
        s.data = {}


def test_repr():
    assert repr(HashSet.empty()) == "HashSet({})"
    assert repr(HashSet.of("x")) == "HashSet({'x'})"
    assert str(HashSet.of(1)) == "HashSet({1})"


def test_map_keeps_image_of_last_scanned_element():
    s = HashSet.of(Tagged(1, "a"), Tagged(2, "b"), Tagged(3, "c"))
    images = s.map(lambda x: Tagged(0, x.tag))
    assert images.count == 1
    last = s.to_array()[-1]
    assert images.member(Tagged(0, "")).a.tag == last.tag


def test_try_from_iterable_propagates_iteration_errors():
    with pytest.raises(TypeError):
        HashSet.try_from_iterable(5)

    def broken():
        yield 1
        raise TypeError("bad generator")

    with pytest.raises(TypeError, match="bad generator"):
        HashSet.try_from_iterable(broken())


def test_try_from_iterable_accepts_generators():
    assert HashSet.try_from_iterable(x for x in (1, 2, 2)) == Right(HashSet.of(1, 2))
