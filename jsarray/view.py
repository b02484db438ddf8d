from __future__ import annotations

import typing
from collections.abc import Iterator, Sequence

if typing.TYPE_CHECKING:
    from .array import JSArray


class ArrayView[T](Sequence[T]):
    """
    Read-only view of the sequence being traversed.

    Passed as the last argument to callbacks that ask for it. It reads the
    original storage, never the result under construction, and must not
    be kept after the operation returns.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Sequence[T]) -> None:
        self._items = items

    @typing.overload
    def __getitem__(self, index: int) -> T: ...

    @typing.overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...

    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ArrayView):
            return list(self._items) == list(typing.cast(ArrayView[object], other))
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return list(self._items) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ArrayView({list(self._items)!r})"

    def to_array(self) -> JSArray[T]:
        """Independent copy of the viewed elements."""
        from .array import JSArray
        return JSArray(self._items)


__all__ = ("ArrayView",)
