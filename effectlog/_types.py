"""
Core type definitions for effectlog.

Aliases used across the library.
"""

from __future__ import annotations

from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Folder = (accumulator, value) -> accumulator
type Folder[S, T] = Callable[[S, T], S]

# Projection = combines the values of two composed steps
type Projection[T, U, V] = Callable[[T, U], V]

# Unit = result type of computations run only for their effect
# NOTE: None plays the role of unit; there is exactly one value of it.
type Unit = None

__all__ = (
    "Predicate",
    "Folder",
    "Projection",
    "Unit",
)
