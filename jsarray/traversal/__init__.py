from .elementwise import (
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
    some,
)
from .fold import reduce, reduce_right
from .sort import sort_in_place, sorted_copy

__all__ = (
    # Elementwise - plain sequences
    "every",
    "filter_list",
    "find",
    "find_index",
    "find_last",
    "find_last_index",
    "flat_map_list",
    "for_each",
    "map_list",
    "some",
    # Elementwise - generic
    "filterM",
    "flat_mapM",
    "mapM",
    # Fold
    "reduce",
    "reduce_right",
    # Sort
    "sort_in_place",
    "sorted_copy",
)
