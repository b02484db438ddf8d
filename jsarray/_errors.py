from __future__ import annotations

import typing


class CallbackError(TypeError):
    """A callback cannot be used by a traversal operation."""

    callback: object

    def __init__(self, callback: object, message: str) -> None:
        self.callback = callback
        super().__init__(message)


class ShapeError(CallbackError):
    """Callback arity is outside the legal shapes of its category."""

    category: str
    arity: int | None
    reason: str

    def __init__(
        self,
        callback: object,
        *,
        category: str,
        legal: typing.Sequence[str],
        reason: str,
        arity: int | None = None,
    ) -> None:
        self.category = category
        self.arity = arity
        self.reason = reason
        shapes = "\n".join(f"    f({shape})" for shape in legal)
        super().__init__(
            callback,
            f"{_describe(callback)}: {reason}\n"
            f"  {category} callbacks must look like one of:\n{shapes}",
        )


class ResultTypeError(CallbackError):
    """Callback declares a return type the operation cannot use."""

    operation: str
    returns: object

    def __init__(self, callback: object, *, operation: str, returns: object, expected: str) -> None:
        self.operation = operation
        self.returns = returns
        super().__init__(
            callback,
            f"{_describe(callback)}: {operation}() needs a callback returning {expected}, "
            f"declared return type is {_annotation_name(returns)}",
        )


def _describe(callback: object) -> str:
    name = getattr(callback, "__qualname__", None) or type(callback).__qualname__
    return f"callback {name!r}"


def _annotation_name(annotation: object) -> str:
    if isinstance(annotation, type):
        return annotation.__qualname__
    return repr(annotation)


__all__ = ("CallbackError", "ResultTypeError", "ShapeError")
