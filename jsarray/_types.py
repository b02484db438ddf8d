"""
Core type definitions for jsarray.

Callback shapes accepted by the traversal operations.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Sequence

# ============================================================================
# Elementwise callbacks: value [, index [, view]]
# ============================================================================

type ValueCallback[T, R] = Callable[[T], R]
type IndexedCallback[T, R] = Callable[[T, int], R]
type ViewCallback[T, R] = Callable[[T, int, Sequence[T]], R]

type Elementwise[T, R] = ValueCallback[T, R] | IndexedCallback[T, R] | ViewCallback[T, R]

# Predicate = elementwise callback answering yes/no
type Predicate[T] = Elementwise[T, bool]

# ============================================================================
# Fold callbacks: acc, value [, index [, view]]
# ============================================================================

type Folder[A, T] = (
    Callable[[A, T], A]
    | Callable[[A, T, int], A]
    | Callable[[A, T, int, Sequence[T]], A]
)

# ============================================================================
# Sort callbacks
# ============================================================================

# Less = strict weak ordering, True when the first argument sorts first
type Less[T] = Callable[[T, T], bool]

# SortKey = Python-native alternative to Less
type SortKey[T] = Callable[[T], typing.Any]

# ============================================================================
# Adapters produced by shape resolution (fixed call forms)
# ============================================================================

type Visit[T, R] = Callable[[T, int], R]
type Step[A, T] = Callable[[A, T, int], A]

# Wrap = builds the result container from a freshly built list
type Wrap[R, M] = Callable[[list[R]], M]

__all__ = (
    "Elementwise",
    "Folder",
    "IndexedCallback",
    "Less",
    "Predicate",
    "SortKey",
    "Step",
    "ValueCallback",
    "ViewCallback",
    "Visit",
    "Wrap",
)
