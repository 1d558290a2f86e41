"""
Fold combinators
================

Effectful fold над последовательностью Writer-шагов.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .._helpers import merge_writer_logs
from ..writer import Writer, WriterResult

def fold[A, T, W](
    items: Sequence[A],
    handler: Callable[[T, A], Writer[T, W]],
    *,
    initial: T,
) -> Writer[T, W]:
    """Effectful fold with log merging. The first bottom step stops it."""

    def run() -> WriterResult[T, W]:
        acc = initial
        raws: list[WriterResult[T, W]] = []

        for item in items:
            wr = handler(acc, item)()
            raws.append(wr)
            if wr.is_bottom:
                return WriterResult.bottom(merge_writer_logs(raws))
            acc = wr.value

        return WriterResult(acc, merge_writer_logs(raws))

    return Writer(run)

__all__ = ("fold",)
