"""
Shape categories
================

Which argument shapes a traversal operation may call a callback with.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Category:
    """
    Legal callback shapes for a family of operations.

    `shapes[k]` lists the parameters passed at arity `min_arity + k`,
    so the last shape always ends with the read-only view.
    """

    name: str
    min_arity: int
    shapes: tuple[str, ...]

    def __post_init__(self) -> None:
        if self.min_arity < 1:
            raise ValueError("Category.min_arity must be >= 1")
        if not self.shapes:
            raise ValueError("Category.shapes must not be empty")

    @property
    def max_arity(self) -> int:
        return self.min_arity + len(self.shapes) - 1

    def accepts(self, arity: int) -> bool:
        return self.min_arity <= arity <= self.max_arity


ELEMENTWISE = Category(
    name="elementwise",
    min_arity=1,
    shapes=(
        "value",
        "value, index",
        "value, index, view",
    ),
)

FOLD = Category(
    name="fold",
    min_arity=2,
    shapes=(
        "acc, value",
        "acc, value, index",
        "acc, value, index, view",
    ),
)


__all__ = ("Category", "ELEMENTWISE", "FOLD")
