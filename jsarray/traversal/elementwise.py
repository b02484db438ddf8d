"""
Elementwise traversals
======================

Visit each element once, in ascending index order, through the callback
shape resolved before the first visit.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from kungfu import Nothing, Option, Some

from .._types import Elementwise, Predicate, Wrap
from ..view import ArrayView
from ..shape import ELEMENTWISE, resolve_or_raise
from ..shape.descriptor import Shape


def _predicate_shape(callback: object, operation: str, arity: int | None) -> Shape:
    return resolve_or_raise(callback, ELEMENTWISE, arity=arity).require_boolean(callback, operation)


# ============================================================================
# Generic combinators (wrap pattern)
# ============================================================================


def mapM[T, R, M](
    items: Sequence[T],
    callback: Elementwise[T, R],
    *,
    wrap: Wrap[R, M],
    arity: int | None = None,
) -> M:
    """Generic map: result[i] = callback(items[i], ...)."""
    shape = resolve_or_raise(callback, ELEMENTWISE, arity=arity).require_element(callback, "map")
    visit = shape.bind(callback, ArrayView(items))
    return wrap([visit(items[index], index) for index in range(len(items))])


def flat_mapM[T, R, M](
    items: Sequence[T],
    callback: Elementwise[T, Iterable[R]],
    *,
    wrap: Wrap[R, M],
    arity: int | None = None,
) -> M:
    """Generic flat map: concatenates the iterables returned per element."""
    shape = resolve_or_raise(callback, ELEMENTWISE, arity=arity).require_element(callback, "flat_map")
    visit = shape.bind(callback, ArrayView(items))
    result: list[R] = []
    for index in range(len(items)):
        result.extend(visit(items[index], index))
    return wrap(result)


def filterM[T, M](
    items: Sequence[T],
    callback: Predicate[T],
    *,
    wrap: Wrap[T, M],
    arity: int | None = None,
) -> M:
    """Generic filter: keeps elements the callback accepts, in order."""
    shape = _predicate_shape(callback, "filter", arity)
    visit = shape.bind(callback, ArrayView(items))
    return wrap([items[index] for index in range(len(items)) if visit(items[index], index)])


# ============================================================================
# Sugar for plain sequences
# ============================================================================


def map_list[T, R](items: Sequence[T], callback: Elementwise[T, R], *, arity: int | None = None) -> list[R]:
    return mapM(items, callback, wrap=_as_list, arity=arity)


def flat_map_list[T, R](
    items: Sequence[T],
    callback: Elementwise[T, Iterable[R]],
    *,
    arity: int | None = None,
) -> list[R]:
    return flat_mapM(items, callback, wrap=_as_list, arity=arity)


def filter_list[T](items: Sequence[T], callback: Predicate[T], *, arity: int | None = None) -> list[T]:
    return filterM(items, callback, wrap=_as_list, arity=arity)


def _as_list[R](values: list[R]) -> list[R]:
    return values


# ============================================================================
# Non-building traversals
# ============================================================================


def for_each[T](items: Sequence[T], callback: Elementwise[T, object], *, arity: int | None = None) -> None:
    """Call `callback` for every element; its result is ignored."""
    visit = resolve_or_raise(callback, ELEMENTWISE, arity=arity).bind(callback, ArrayView(items))
    for index in range(len(items)):
        visit(items[index], index)


def every[T](items: Sequence[T], callback: Predicate[T], *, arity: int | None = None) -> bool:
    """True unless some element fails. Vacuously true when empty."""
    visit = _predicate_shape(callback, "every", arity).bind(callback, ArrayView(items))
    for index in range(len(items)):
        if not visit(items[index], index):
            return False
    return True


def some[T](items: Sequence[T], callback: Predicate[T], *, arity: int | None = None) -> bool:
    """True once some element passes. Vacuously false when empty."""
    visit = _predicate_shape(callback, "some", arity).bind(callback, ArrayView(items))
    for index in range(len(items)):
        if visit(items[index], index):
            return True
    return False


def find_index[T](items: Sequence[T], callback: Predicate[T], *, arity: int | None = None) -> Option[int]:
    """Index of the first element the callback accepts."""
    visit = _predicate_shape(callback, "find_index", arity).bind(callback, ArrayView(items))
    for index in range(len(items)):
        if visit(items[index], index):
            return Some(index)
    return Nothing()


def find_last_index[T](items: Sequence[T], callback: Predicate[T], *, arity: int | None = None) -> Option[int]:
    """Index of the last element the callback accepts. Scans descending."""
    visit = _predicate_shape(callback, "find_last_index", arity).bind(callback, ArrayView(items))
    for index in range(len(items) - 1, -1, -1):
        if visit(items[index], index):
            return Some(index)
    return Nothing()


def find[T](items: Sequence[T], callback: Predicate[T], *, arity: int | None = None) -> Option[T]:
    """First element the callback accepts."""
    return _element_at(items, find_index(items, callback, arity=arity))


def find_last[T](items: Sequence[T], callback: Predicate[T], *, arity: int | None = None) -> Option[T]:
    """Last element the callback accepts."""
    return _element_at(items, find_last_index(items, callback, arity=arity))


def _element_at[T](items: Sequence[T], position: Option[int]) -> Option[T]:
    match position:
        case Some(index):
            return Some(items[index])
        case _:
            return Nothing()


__all__ = (
    "every",
    "filterM",
    "filter_list",
    "find",
    "find_index",
    "find_last",
    "find_last_index",
    "flat_mapM",
    "flat_map_list",
    "for_each",
    "mapM",
    "map_list",
    "some",
)
