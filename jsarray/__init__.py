"""
Array-style traversals for Python sequences.

A resizable sequence container (`JSArray`) whose higher-order operations
accept callbacks of several shapes and pick the right one before the
first element is visited.

Architecture:
- Shape resolution (`jsarray.shape`) reads a callback's signature once per call
- Generic traversals (*M functions) build any container via a wrap function
- Sugar for plain lists (*_list functions) and the `JSArray` methods
"""

import logging

# Core types
from ._types import Elementwise, Folder, Less, Predicate, SortKey

# Shape resolution
from . import shape
from .shape import ELEMENTWISE, FOLD, Category, Shape, resolve, resolve_or_raise

# Container
from .array import JSArray
from .view import ArrayView

# Traversals over any sequence
from . import traversal
from .traversal import (
    every,
    filterM,
    filter_list,
    find,
    find_index,
    find_last,
    find_last_index,
    flat_mapM,
    flat_map_list,
    for_each,
    mapM,
    map_list,
    reduce,
    reduce_right,
    some,
    sort_in_place,
    sorted_copy,
)

# Errors
from ._errors import CallbackError, ResultTypeError, ShapeError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Elementwise",
    "Folder",
    "Less",
    "Predicate",
    "SortKey",
    # Shape resolution
    "shape",
    "Category",
    "ELEMENTWISE",
    "FOLD",
    "Shape",
    "resolve",
    "resolve_or_raise",
    # Container
    "JSArray",
    "ArrayView",
    # Traversals
    "traversal",
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
    "reduce",
    "reduce_right",
    "some",
    "sort_in_place",
    "sorted_copy",
    # Errors
    "CallbackError",
    "ResultTypeError",
    "ShapeError",
)
