"""
Call functions for Writer monad.

Call and decorators for functions returning WriterResult.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from ..writer import Writer, WriterResult

def call[T, W, **P](
    func: Callable[P, WriterResult[T, W]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Writer[T, W]:
    """Defer a function returning WriterResult. Nothing runs until evaluation."""

    def run() -> WriterResult[T, W]:
        return func(*args, **kwargs)

    return Writer(run)

def lifted[T, W, **P](
    func: Callable[P, WriterResult[T, W]],
) -> Callable[P, Writer[T, W]]:
    """Decorator for Writer functions."""

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Writer[T, W]:
        return call(func, *args, **kwargs)

    return wrapper

__all__ = (
    "call",
    "lifted",
)
