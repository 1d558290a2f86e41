"""Internal helpers for effectlog.

Common functions used across multiple modules.
These are not part of the public API but are handy when writing custom combinators."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .writer.log import Log
from .writer.result import WriterResult

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def bmap[T, R, W](wr: WriterResult[T, W], f: Callable[[T], R]) -> WriterResult[R, W]:
    """
    Map over a WriterResult unless it is bottom.

    Bottom stays bottom with the same log and ``f`` is never called.
    """
    if wr.is_bottom:
        return WriterResult.bottom(wr.log)
    return WriterResult(f(wr.value), wr.log)

# Log merging helpers
def merge_logs[W](logs: Iterable[Log[W]]) -> Log[W]:
    """
    Merge multiple logs into one using monoidal combine.

    Usage:
        logs = [wr.log for wr in writer_results]
        merged = merge_logs(logs)
    """
    result = Log[W]()
    for log in logs:
        result = result.combine(log)
    return result

def merge_writer_logs[T, W](wrs: Iterable[WriterResult[T, W]]) -> Log[W]:
    """Extract and merge logs from multiple WriterResults."""
    return merge_logs(wr.log for wr in wrs)

__all__ = (
    "identity",
    "bmap",
    "merge_logs",
    "merge_writer_logs",
)
