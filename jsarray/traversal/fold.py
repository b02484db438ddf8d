"""
Fold traversals
===============

Thread one accumulator through every element. The accumulator takes the
callback's result type; `initial` must already be of that type.
"""

from __future__ import annotations

from collections.abc import Sequence

from .._types import Folder
from ..shape import FOLD, resolve_or_raise
from ..view import ArrayView


def reduce[A, T](
    items: Sequence[T],
    callback: Folder[A, T],
    initial: A,
    *,
    arity: int | None = None,
) -> A:
    """Left fold over indices 0..N-1. Empty input returns `initial`."""
    step = resolve_or_raise(callback, FOLD, arity=arity).bind(callback, ArrayView(items))
    acc = initial
    for index in range(len(items)):
        acc = step(acc, items[index], index)
    return acc


def reduce_right[A, T](
    items: Sequence[T],
    callback: Folder[A, T],
    initial: A,
    *,
    arity: int | None = None,
) -> A:
    """
    Right fold over indices N-1..0. Empty input returns `initial`.

    The index passed to the callback is the element's own position, not
    its position in the reversed visiting order.
    """
    step = resolve_or_raise(callback, FOLD, arity=arity).bind(callback, ArrayView(items))
    acc = initial
    for index in range(len(items) - 1, -1, -1):
        acc = step(acc, items[index], index)
    return acc


__all__ = ("reduce", "reduce_right")
