"""
Опускание Writer в значение.

Functions for evaluating Writer and extracting its value and log.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Result

from ..writer import Log, Writer, WriterResult

def evaluate[T, W](writer: Writer[T, W]) -> WriterResult[T, W]:
    """Run Writer and return WriterResult."""
    return writer()

def to_tuple[T, W](writer: Writer[T, W]) -> tuple[T, Log[W], bool]:
    """Run Writer and return (value, log, is_bottom)."""
    wr = writer()
    return (wr.value, wr.log, wr.is_bottom)

def to_result[T, E, W](
    writer: Writer[T, W],
    *,
    error: Callable[[], E],
) -> Result[T, E]:
    """Run Writer and return kungfu Result (discard log). Bottom -> Error(error())."""
    return writer().to_result(error)

def unsafe[T, W](writer: Writer[T, W]) -> tuple[T, Log[W]]:
    """Run and unwrap, raises BottomError on bottom. Returns (value, log)."""
    wr = writer()
    return (wr.unwrap(), wr.log)

def or_else[T, W](writer: Writer[T, W], default: T) -> tuple[T, Log[W]]:
    """Run and return (value or default, log)."""
    wr = writer()
    return (wr.unwrap_or(default), wr.log)

def values[T, W](writer: Writer[T, W]) -> list[T]:
    """Run and return [] when bottom, [value] otherwise."""
    return list(writer())

__all__ = (
    "evaluate",
    "to_tuple",
    "to_result",
    "unsafe",
    "or_else",
    "values",
)
