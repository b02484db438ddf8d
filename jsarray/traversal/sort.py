"""
Sort operations
===============

`compare` is a less-than relation and must be a strict weak ordering;
anything else gives an unspecified order. Unlike the other traversals,
comparators are never shape-resolved: any callable taking two elements
works, including ones declared with `*args`.

Both functions sort with `list.sort`, so equal elements keep their
relative order (the sort is stable).
"""

from __future__ import annotations

import functools
import typing
from collections.abc import Iterable

from .._types import Less, SortKey


def sort_in_place[T](
    items: list[T],
    compare: Less[T] | None = None,
    *,
    key: SortKey[T] | None = None,
    reverse: bool = False,
) -> list[T]:
    """Reorder `items` itself and return it."""
    items.sort(key=_sort_key(compare, key), reverse=reverse)
    return items


def sorted_copy[T](
    items: Iterable[T],
    compare: Less[T] | None = None,
    *,
    key: SortKey[T] | None = None,
    reverse: bool = False,
) -> list[T]:
    """Sort an independent copy, leaving `items` untouched."""
    return sort_in_place(list(items), compare, key=key, reverse=reverse)


def _sort_key[T](compare: Less[T] | None, key: SortKey[T] | None) -> SortKey[T] | None:
    if compare is None:
        return key
    if key is not None:
        raise ValueError("pass either compare or key, not both")
    if not callable(compare):
        raise TypeError(f"compare must be callable, got {type(compare).__qualname__}")
    return functools.cmp_to_key(_three_way(compare))


def _three_way[T](less: Less[T]) -> typing.Callable[[T, T], int]:
    def cmp(a: T, b: T) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0
    return cmp


__all__ = ("sort_in_place", "sorted_copy")
