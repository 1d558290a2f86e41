"""Sequence combinators

Structure flipping: [Writer[T]] -> Writer[[T]]."""

from __future__ import annotations

from collections.abc import Sequence

from .._helpers import identity
from ..writer import Writer
from .traverse import traverse

def sequence[T, W](writers: Sequence[Writer[T, W]]) -> Writer[list[T], W]:
    """Flip structure with log merging. Implemented as traverse(id)."""
    return traverse(writers, handler=identity)

__all__ = ("sequence",)
