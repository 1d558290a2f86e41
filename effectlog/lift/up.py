"""
Подъем значений в Writer.

Functions turning plain values, kungfu Results and Optionals into Writer.
"""

from __future__ import annotations

import typing

from kungfu import Error, Ok, Result

from ..writer import Log, Writer, WriterResult

def pure[T, W](
    value: T,
    *,
    log: list[W] | None = None,
) -> Writer[T, W]:
    """
    Lift value into Writer with optional log.

    Example:
        from effectlog import lift as L

        w = L.up.pure(5)
        w.evaluate()  # WriterResult(5, log=Log([]))
    """

    def run() -> WriterResult[T, W]:
        return WriterResult(value, Log(log or []))

    return Writer(run)

def tell[W](log: list[W]) -> Writer[None, W]:
    """Create Writer with only log, no value."""
    return pure(None, log=log)

def bottom[W](*, log: list[W] | None = None) -> Writer[typing.Any, W]:
    """Create already short-circuited Writer. Dual of pure()."""

    def run() -> WriterResult[typing.Any, W]:
        return WriterResult.bottom(Log(log or []))

    return Writer(run)

def from_result[T, W](
    result: Result[T, typing.Any],
    *,
    log: list[W] | None = None,
) -> Writer[T, W]:
    """
    Lift kungfu Result into Writer with log.

    Ok(v) -> Active with v, Error(_) -> bottom. The error value is dropped:
    bottom carries no reason, only the log.
    """

    def run() -> WriterResult[T, W]:
        match result:
            case Ok(value):
                return WriterResult(value, Log(log or []))
            case Error(_):
                return WriterResult.bottom(Log(log or []))
            case _ as unreachable:
                typing.assert_never(unreachable)

    return Writer(run)

def optional[T, W](
    value: T | None,
    *,
    log: list[W] | None = None,
) -> Writer[T, W]:
    """
    Convert Optional to Writer. None becomes bottom.

    **When to use:** lookups returning ``T | None`` at the start of a chain.
    """

    def run() -> WriterResult[T, W]:
        if value is None:
            return WriterResult.bottom(Log(log or []))
        return WriterResult(value, Log(log or []))

    return Writer(run)

__all__ = (
    "pure",
    "tell",
    "bottom",
    "from_result",
    "optional",
)
