"""
WriterResult - value, accumulated log and bottom flag
=====================================================
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from kungfu import Error, Ok, Result

from .._errors import BottomError, MissingLogError
from .log import Log

class WriterResult[T, W]:
    """
    Outcome of evaluating a Writer.

    Combines:
    - value: T, meaningful only when not bottom
    - log: Log[W], never absent (possibly empty)
    - is_bottom: computation was short-circuited (e.g. a filter rejected it)

    This is the "unwrapped" form of Writer. There are no implicit
    conversions: read the value through unwrap(), unwrap_or(), to_result()
    or by iterating, which yields zero or one value.
    """

    __slots__ = ("_value", "_log", "_is_bottom")
    __match_args__ = ("_value", "_log", "_is_bottom")

    def __init__(self, value: T, log: Iterable[W], is_bottom: bool = False) -> None:
        if log is None:
            raise MissingLogError()
        self._value = value
        self._log: Log[W] = Log(log)
        self._is_bottom = is_bottom

    @staticmethod
    def bottom[V, LogT](log: Iterable[LogT]) -> WriterResult[V, LogT]:
        """Bottom result carrying ``log``. Its value is None."""
        return WriterResult(None, log, True)  # type: ignore[arg-type]

    @property
    def value(self) -> T:
        """The produced value. Unspecified (None) when bottom."""
        return self._value

    @property
    def log(self) -> Log[W]:
        """The accumulated log."""
        return self._log

    @property
    def is_bottom(self) -> bool:
        return self._is_bottom

    def unwrap(self) -> T:
        """Return the value, raising BottomError when bottom."""
        if self._is_bottom:
            raise BottomError(self._log)
        return self._value

    def unwrap_or(self, default: T, /) -> T:
        """Return the value, or ``default`` when bottom."""
        return default if self._is_bottom else self._value

    def to_result[E](self, error: Callable[[], E], /) -> Result[T, E]:
        """
        Convert to kungfu Result, dropping the log.

        ``error`` is a thunk so nothing is built for non-bottom results.
        """
        if self._is_bottom:
            return Error(error())
        return Ok(self._value)

    def __iter__(self) -> Iterator[T]:
        if not self._is_bottom:
            yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WriterResult):
            return NotImplemented
        return (self._value, list(self._log), self._is_bottom) == (
            other._value,
            list(other._log),
            other._is_bottom,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._is_bottom:
            return f"WriterResult(<bottom>, log={self._log!r})"
        return f"WriterResult({self._value!r}, log={self._log!r})"

__all__ = ("WriterResult",)
