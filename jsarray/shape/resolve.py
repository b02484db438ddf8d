"""
Shape resolution
================

Works out, before any element is visited, how many of the legal
positional slots a callback consumes and what it declares to return.

Resolution reads the callback's signature with `inspect`, which covers
plain functions, lambdas, closures, bound methods, `functools.partial`
and objects defining `__call__`. Callbacks whose parameter list is only
fixed at the call site (`*args`) and builtins without an introspectable
signature cannot be resolved; callers pin their shape with `arity=`.
"""

from __future__ import annotations

import inspect
import logging
import typing

from kungfu import Error, Ok, Result

from .._errors import ShapeError
from .category import Category
from .descriptor import Shape

logger = logging.getLogger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def resolve(
    callback: object,
    category: Category,
    *,
    arity: int | None = None,
) -> Result[Shape, ShapeError]:
    """
    Resolve the shape of `callback` for operations of `category`.

    With `arity` given the signature is not consulted for the arity,
    only (best effort) for the declared return type.
    """
    if not callable(callback):
        return _reject(callback, category, f"{type(callback).__qualname__} object is not callable")

    if arity is not None:
        return _explicit(callback, category, arity)

    try:
        signature = _signature(callback)
    except (TypeError, ValueError) as e:
        return _reject(callback, category, f"signature cannot be introspected ({e}); pass arity= explicitly")

    positional = 0
    for parameter in signature.parameters.values():
        if parameter.kind in _POSITIONAL:
            positional += 1
        elif parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return _reject(
                callback,
                category,
                f"variadic parameter *{parameter.name} leaves the shape undecided; pass arity= explicitly",
            )
        elif parameter.kind is inspect.Parameter.KEYWORD_ONLY and parameter.default is inspect.Parameter.empty:
            return _reject(callback, category, f"keyword-only parameter {parameter.name!r} has no default")

    if not category.accepts(positional):
        return _reject(callback, category, f"takes {positional} positional parameter(s)", arity=positional)

    shape = Shape(category, positional, _returns(signature))
    logger.debug("resolved %s shape of %r: arity=%d returns=%r", category.name, callback, shape.arity, shape.returns)
    return Ok(shape)


def resolve_or_raise(callback: object, category: Category, *, arity: int | None = None) -> Shape:
    """Resolve or raise the `ShapeError` describing why not."""
    match resolve(callback, category, arity=arity):
        case Ok(shape):
            return shape
        case Error(error):
            raise error


def _explicit(callback: object, category: Category, arity: int) -> Result[Shape, ShapeError]:
    if isinstance(arity, bool) or not isinstance(arity, int):
        return _reject(callback, category, f"arity= must be an int, got {arity!r}")
    if not category.accepts(arity):
        return _reject(callback, category, f"arity={arity} was requested", arity=arity)

    try:
        returns = _returns(_signature(callback))
    except (TypeError, ValueError):
        returns = typing.Any

    logger.debug("pinned %s shape of %r: arity=%d", category.name, callback, arity)
    return Ok(Shape(category, arity, returns))


def _signature(callback: object) -> inspect.Signature:
    # String annotations (PEP 563) are evaluated when their names resolve.
    try:
        return inspect.signature(typing.cast(typing.Callable[..., object], callback), eval_str=True)
    except (NameError, AttributeError, SyntaxError):
        return inspect.signature(typing.cast(typing.Callable[..., object], callback))


def _returns(signature: inspect.Signature) -> typing.Any:
    if signature.return_annotation is inspect.Signature.empty:
        return typing.Any
    return signature.return_annotation


def _reject(
    callback: object,
    category: Category,
    reason: str,
    *,
    arity: int | None = None,
) -> Result[Shape, ShapeError]:
    logger.debug("rejected %s callback %r: %s", category.name, callback, reason)
    return Error(
        ShapeError(
            callback,
            category=category.name,
            legal=category.shapes,
            reason=reason,
            arity=arity,
        )
    )


__all__ = ("resolve", "resolve_or_raise")
