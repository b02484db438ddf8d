from .category import ELEMENTWISE, FOLD, Category
from .descriptor import Shape
from .resolve import resolve, resolve_or_raise

__all__ = (
    "Category",
    "ELEMENTWISE",
    "FOLD",
    "Shape",
    "resolve",
    "resolve_or_raise",
)
