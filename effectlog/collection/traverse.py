"""Traverse combinators

Monadic traverse over Writer with log merging."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .._helpers import merge_writer_logs
from ..writer import Writer, WriterResult

def traverse[A, T, W](
    items: Sequence[A],
    handler: Callable[[A], Writer[T, W]],
) -> Writer[list[T], W]:
    """
    Monadic map: A -> Writer[T]. Sequential to preserve log order.

    The first bottom stops the traversal; the result is bottom with the
    logs gathered up to and including that step.
    """

    def run() -> WriterResult[list[T], W]:
        values: list[T] = []
        raws: list[WriterResult[T, W]] = []

        for item in items:
            wr = handler(item)()
            raws.append(wr)
            if wr.is_bottom:
                return WriterResult.bottom(merge_writer_logs(raws))
            values.append(wr.value)

        return WriterResult(values, merge_writer_logs(raws))

    return Writer(run)

__all__ = ("traverse",)
