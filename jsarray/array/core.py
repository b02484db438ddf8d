"""
JSArray
=======

Resizable sequence with array-style traversal methods.

Storage is an owned `list`; the standard mutable-sequence surface is
re-exposed on top of it and every traversal delegates to
`jsarray.traversal`. Not safe for concurrent mutation without external
locking.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator, MutableSequence

from kungfu import Option

from .. import traversal
from .._types import Elementwise, Folder, Less, Predicate, SortKey


class JSArray[T](MutableSequence[T]):
    """
    Ordered, resizable, 0-indexed sequence of `T`.

    Callbacks passed to the traversal methods may take `(value)`,
    `(value, index)` or `(value, index, view)`; folds take the
    accumulator first. The shape is read from the callback's signature
    before the first element is visited, or pinned with `arity=`.

    Positional parameters with defaults count as slots, so `round`
    would get the index as `ndigits` and `pow` the view as `mod`.
    Pin such callbacks to the value only:

        xs.map(round, arity=1)

    Example:
        xs = JSArray.of(3, 1, 2)
        xs.map(lambda x: x * 2)              # JSArray([6, 2, 4])
        xs.map(lambda v, i, view: v + i)     # JSArray([3, 2, 4])
        xs.reduce(lambda acc, x: acc + x, 0) # 6
    """

    __slots__ = ("_items",)

    _items: list[T]

    def __init__(self, items: Iterable[T] = (), /) -> None:
        self._items = list(items)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @staticmethod
    def of[U](*items: U) -> JSArray[U]:
        """Create array from literal items."""
        return JSArray._adopt(list(items))

    @staticmethod
    def filled[U](length: int, value: U) -> JSArray[U]:
        """Create array of `length` copies of `value`."""
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}")
        return JSArray._adopt([value] * length)

    @classmethod
    def _adopt[U](cls, items: list[U]) -> JSArray[U]:
        # Takes ownership of `items` without copying.
        array: JSArray[U] = cls.__new__(cls)  # type: ignore[assignment]
        array._items = items
        return array

    def copy(self) -> JSArray[T]:
        return JSArray._adopt(list(self._items))

    def to_list(self) -> list[T]:
        return list(self._items)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    @typing.overload
    def __getitem__(self, index: int) -> T: ...

    @typing.overload
    def __getitem__(self, index: slice) -> JSArray[T]: ...

    def __getitem__(self, index: int | slice) -> T | JSArray[T]:
        if isinstance(index, slice):
            return JSArray._adopt(self._items[index])
        return self._items[index]

    @typing.overload
    def __setitem__(self, index: int, value: T) -> None: ...

    @typing.overload
    def __setitem__(self, index: slice, value: Iterable[T]) -> None: ...

    def __setitem__(self, index: int | slice, value: typing.Any) -> None:
        self._items[index] = value

    def __delitem__(self, index: int | slice) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def insert(self, index: int, value: T) -> None:
        self._items.insert(index, value)

    def append(self, value: T) -> None:
        self._items.append(value)

    def extend(self, values: Iterable[T]) -> None:
        self._items.extend(values)

    def clear(self) -> None:
        self._items.clear()

    def __add__(self, other: Iterable[T]) -> JSArray[T]:
        return JSArray._adopt([*self._items, *other])

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JSArray):
            return self._items == typing.cast(JSArray[object], other)._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JSArray({self._items!r})"

    # ------------------------------------------------------------------
    # Elementwise traversals
    # ------------------------------------------------------------------

    def map[R](self, callback: Elementwise[T, R], *, arity: int | None = None) -> JSArray[R]:
        """New array of the callback's results, same length."""
        return traversal.mapM(self._items, callback, wrap=JSArray._adopt, arity=arity)

    def flat_map[R](self, callback: Elementwise[T, Iterable[R]], *, arity: int | None = None) -> JSArray[R]:
        """New array of the callback's results flattened one level."""
        return traversal.flat_mapM(self._items, callback, wrap=JSArray._adopt, arity=arity)

    def filter(self, callback: Predicate[T], *, arity: int | None = None) -> JSArray[T]:
        """New array of the elements the callback accepts."""
        return traversal.filterM(self._items, callback, wrap=JSArray._adopt, arity=arity)

    def for_each(self, callback: Elementwise[T, object], *, arity: int | None = None) -> None:
        traversal.for_each(self._items, callback, arity=arity)

    def every(self, callback: Predicate[T], *, arity: int | None = None) -> bool:
        return traversal.every(self._items, callback, arity=arity)

    def some(self, callback: Predicate[T], *, arity: int | None = None) -> bool:
        return traversal.some(self._items, callback, arity=arity)

    def find(self, callback: Predicate[T], *, arity: int | None = None) -> Option[T]:
        return traversal.find(self._items, callback, arity=arity)

    def find_index(self, callback: Predicate[T], *, arity: int | None = None) -> Option[int]:
        return traversal.find_index(self._items, callback, arity=arity)

    def find_last(self, callback: Predicate[T], *, arity: int | None = None) -> Option[T]:
        return traversal.find_last(self._items, callback, arity=arity)

    def find_last_index(self, callback: Predicate[T], *, arity: int | None = None) -> Option[int]:
        return traversal.find_last_index(self._items, callback, arity=arity)

    # ------------------------------------------------------------------
    # Folds
    # ------------------------------------------------------------------

    def reduce[A](self, callback: Folder[A, T], initial: A, *, arity: int | None = None) -> A:
        return traversal.reduce(self._items, callback, initial, arity=arity)

    def reduce_right[A](self, callback: Folder[A, T], initial: A, *, arity: int | None = None) -> A:
        return traversal.reduce_right(self._items, callback, initial, arity=arity)

    # ------------------------------------------------------------------
    # Sorting (stable)
    # ------------------------------------------------------------------

    def sort(
        self,
        compare: Less[T] | None = None,
        *,
        key: SortKey[T] | None = None,
        reverse: bool = False,
    ) -> typing.Self:
        """Sort in place and return this same array."""
        traversal.sort_in_place(self._items, compare, key=key, reverse=reverse)
        return self

    def to_sorted(
        self,
        compare: Less[T] | None = None,
        *,
        key: SortKey[T] | None = None,
        reverse: bool = False,
    ) -> JSArray[T]:
        """Sorted independent copy; this array is left untouched."""
        return JSArray._adopt(traversal.sorted_copy(self._items, compare, key=key, reverse=reverse))


__all__ = ("JSArray",)
