"""
Shape descriptor
================

The resolved, immutable fact about how a callback is called.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .._errors import ResultTypeError
from .._types import Step, Visit
from .category import FOLD, Category

_BOOLEAN_NAMES = frozenset({"bool", "builtins.bool", "Any", "typing.Any"})
_BOTTOM_NAMES = frozenset({"Never", "NoReturn", "typing.Never", "typing.NoReturn"})


@dataclass(frozen=True, slots=True)
class Shape:
    """
    Arity and declared result type of a callback.

    `returns` is the declared return annotation, `typing.Any` when the
    callback declares none.
    """

    category: Category
    arity: int
    returns: typing.Any = typing.Any

    def __post_init__(self) -> None:
        if not self.category.accepts(self.arity):
            raise ValueError(
                f"arity {self.arity} is not a legal {self.category.name} arity "
                f"({self.category.min_arity}..{self.category.max_arity})"
            )

    @property
    def wants_index(self) -> bool:
        return self.arity >= self.category.min_arity + 1

    @property
    def wants_view(self) -> bool:
        return self.arity == self.category.max_arity

    # ------------------------------------------------------------------
    # Result type checks
    # ------------------------------------------------------------------

    def require_boolean(self, callback: object, operation: str) -> Shape:
        """Fail if the callback declares a non-boolean result."""
        if not _is_boolean(self.returns):
            raise ResultTypeError(callback, operation=operation, returns=self.returns, expected="bool")
        return self

    def require_element(self, callback: object, operation: str) -> Shape:
        """Fail if the callback declares it never returns a value."""
        if _is_bottom(self.returns):
            raise ResultTypeError(
                callback, operation=operation, returns=self.returns, expected="a value"
            )
        return self

    # ------------------------------------------------------------------
    # Adapters
    # ------------------------------------------------------------------

    def bind[T, R](self, callback: Callable[..., R], view: Sequence[T]) -> Callable[..., R]:
        """
        Adapter with a fixed call form forwarding exactly `arity` arguments.

        Elementwise adapters are called as `(value, index)`, fold adapters
        as `(acc, value, index)`.
        """
        if self.category == FOLD:
            return self._bind_fold(callback, view)
        return self._bind_elementwise(callback, view)

    def _bind_elementwise[T, R](self, callback: Callable[..., R], view: Sequence[T]) -> Visit[T, R]:
        if not self.wants_index:
            def visit_value(value: T, index: int) -> R:
                _ = index
                return callback(value)
            return visit_value
        if not self.wants_view:
            return callback

        def visit_view(value: T, index: int) -> R:
            return callback(value, index, view)
        return visit_view

    def _bind_fold[A, T](self, callback: Callable[..., A], view: Sequence[T]) -> Step[A, T]:
        if not self.wants_index:
            def step_value(acc: A, value: T, index: int) -> A:
                _ = index
                return callback(acc, value)
            return step_value
        if not self.wants_view:
            return callback

        def step_view(acc: A, value: T, index: int) -> A:
            return callback(acc, value, index, view)
        return step_view


def _is_boolean(annotation: object) -> bool:
    if annotation is typing.Any or annotation is bool:
        return True
    if isinstance(annotation, str):
        name = annotation.strip()
        return name in _BOOLEAN_NAMES or name.startswith(("TypeGuard[", "TypeIs[", "typing.TypeGuard[", "typing.TypeIs["))
    origin = typing.get_origin(annotation)
    if origin is typing.TypeGuard or origin is typing.TypeIs:
        return True
    if origin is typing.Literal:
        return all(isinstance(arg, bool) for arg in typing.get_args(annotation))
    return False


def _is_bottom(annotation: object) -> bool:
    if isinstance(annotation, str):
        return annotation.strip() in _BOTTOM_NAMES
    return annotation is typing.Never or annotation is typing.NoReturn


__all__ = ("Shape",)
