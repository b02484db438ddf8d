"""
Property tests for the traversal operations.
"""

from hypothesis import given, strategies as st

from jsarray import JSArray

ints = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=40)


def double(x):
    return x * 2


def is_even(x):
    return x % 2 == 0


@given(ints)
def test_map_preserves_length_and_positions(values):
    s = JSArray(values)
    mapped = s.map(double)
    assert len(mapped) == len(s)
    assert all(mapped[i] == double(s[i]) for i in range(len(s)))


@given(ints)
def test_map_shapes_agree_for_pure_function(values):
    s = JSArray(values)
    assert s.map(double) == s.map(lambda v, i: double(v)) == s.map(lambda v, i, view: double(v))


@given(ints)
def test_filter_is_idempotent(values):
    once = JSArray(values).filter(is_even)
    assert once.filter(is_even) == once


@given(ints)
def test_every_and_some_agree_with_builtins(values):
    s = JSArray(values)
    assert s.every(is_even) == all(is_even(x) for x in values)
    assert s.some(is_even) == any(is_even(x) for x in values)


@given(ints)
def test_reduce_sums_and_matches_reduce_right_for_commutative_add(values):
    s = JSArray(values)
    add = lambda acc, x: acc + x  # noqa: E731
    assert s.reduce(add, 0) == sum(values)
    assert s.reduce_right(add, 0) == s.reduce(add, 0)


@given(ints)
def test_to_sorted_does_not_mutate(values):
    s = JSArray(values)
    before = s.to_list()
    result = s.to_sorted(lambda a, b: a < b)
    assert s == before
    assert result == sorted(values)


@given(ints)
def test_sort_mutates_in_place(values):
    s = JSArray(values)
    assert s.sort() is s
    assert s == sorted(values)
