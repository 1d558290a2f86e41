"""Writer Monad

Deferred computation producing a value, an ordered log and a bottom flag.

A Writer is a zero-argument function returning WriterResult. It is never
mutated after construction, so it can be evaluated any number of times.

Short-circuit states:
- Active (is_bottom=False): map/bind/fold keep it Active
- Bottom (is_bottom=True): reached through filter rejecting the value
  (or a step that is itself bottom); every later combinator keeps it Bottom
  and never calls the supplied closure"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Iterable, Iterator

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import bmap, identity
from .._types import Folder, Predicate, Projection, Unit
from .log import Log
from .result import WriterResult

logger = logging.getLogger(__name__)

class Writer[T, W]:
    """Writer Monad.

    Combines: Lazy + bottom short-circuit + Writer[Log[W]]

    Monadic laws:
    - Left identity: pure(a).bind(f) ≡ f(a)
    - Right identity: m.bind(pure) ≡ m
    - Associativity: m.bind(f).bind(g) ≡ m.bind(x => f(x).bind(g))
    """

    __slots__ = ("_value",)

    def __init__(self, value: Callable[[], WriterResult[T, W]], /) -> None:
        """Create Writer from a fn returning WriterResult."""
        self._value = value

    # Constructors

    @staticmethod
    def pure[V](value: V) -> Writer[V, typing.Any]:
        """Lift a value into the monad with empty log."""

        def wrapper() -> WriterResult[V, typing.Any]:
            return WriterResult(value, Log())

        return Writer(wrapper)

    @staticmethod
    def tell[LogEntry](*entries: LogEntry) -> Writer[None, LogEntry]:
        """Write entries to the log without producing a value."""

        def wrapper() -> WriterResult[None, LogEntry]:
            return WriterResult(None, Log.of(*entries))

        return Writer(wrapper)

    @staticmethod
    def bottom[LogEntry](*entries: LogEntry) -> Writer[typing.Any, LogEntry]:
        """Already short-circuited computation carrying ``entries``."""

        def wrapper() -> WriterResult[typing.Any, LogEntry]:
            return WriterResult.bottom(Log.of(*entries))

        return Writer(wrapper)

    @staticmethod
    def from_result[V, LogT](result: Result[V, typing.Any]) -> Writer[V, LogT]:
        """Lift a kungfu Result: Ok stays Active, Error becomes bottom."""

        def wrapper() -> WriterResult[V, LogT]:
            match result:
                case Ok(value):
                    return WriterResult(value, Log())
                case Error(_):
                    return WriterResult.bottom(Log())
                case _ as unreachable:
                    typing.assert_never(unreachable)

        return Writer(wrapper)

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> Writer[U, W]:
        """Functor fmap - apply function to value, preserve log."""

        def wrapper() -> WriterResult[U, W]:
            return bmap(self(), f)

        return Writer(wrapper)

    def map_log[V](self, f: Callable[[Log[W]], Iterable[V]], /) -> Writer[T, V]:
        """Transform the log. Runs on bottom results too."""

        def wrapper() -> WriterResult[T, V]:
            wr = self()
            return WriterResult(wr.value, f(wr.log), wr.is_bottom)

        return Writer(wrapper)

    # Monad operations

    def bind[U](self, f: Callable[[T], Writer[U, W]], /) -> Writer[U, W]:
        """
        Monadic bind (>>=).

        - Active: runs f(value), combines logs, takes the second step's bottom flag
        - Bottom: short-circuit, preserves current log, f is not called
        """

        def wrapper() -> WriterResult[U, W]:
            wr = self()
            if wr.is_bottom:
                return WriterResult.bottom(wr.log)
            next_wr = f(wr.value)()
            return WriterResult(next_wr.value, wr.log.combine(next_wr.log), next_wr.is_bottom)

        return Writer(wrapper)

    def select_many[U, V](
        self,
        bind: Callable[[T], typing.Any],
        project: Projection[T, U, V],
        /,
    ) -> Writer[typing.Any, W]:
        """
        Two-step composition with a Writer, Reader or State produced by ``bind``.

        See compose.select_many for the per-effect semantics.
        """
        from .compose import select_many

        return select_many(self, bind, project)

    def filter(self, pred: Predicate[T], /) -> Writer[T, W]:
        """Short-circuit when ``pred`` rejects the value."""

        def wrapper() -> WriterResult[T, W]:
            wr = self()
            if wr.is_bottom:
                return wr
            if pred(wr.value):
                return wr
            logger.debug("filter rejected %r, writer is now bottom", wr.value)
            return WriterResult(wr.value, wr.log, True)

        return Writer(wrapper)

    where = filter

    # Folds over the single produced value

    def iter(self, action: Callable[[T], None], /) -> Writer[Unit, W]:
        """
        Run ``action`` on the value for its side effect.

        NOTE: the result is a fresh unit computation with an empty log;
              the source log is discarded.
        """

        def wrapper() -> WriterResult[Unit, W]:
            wr = self()
            if not wr.is_bottom:
                action(wr.value)
            return WriterResult(None, Log())

        return Writer(wrapper)

    def fold[S](self, seed: S, folder: Folder[S, T], /) -> Writer[S, W]:
        def wrapper() -> WriterResult[S, W]:
            return bmap(self(), lambda value: folder(seed, value))

        return Writer(wrapper)

    def count(self) -> Writer[int, W]:
        return Writer(lambda: bmap(self(), lambda _: 1))

    def sum(self) -> Writer[T, W]:
        """The numeric value itself: a Writer holds exactly one."""
        return Writer(lambda: bmap(self(), identity))

    def for_all(self, pred: Predicate[T], /) -> Writer[bool, W]:
        return Writer(lambda: bmap(self(), pred))

    def exists(self, pred: Predicate[T], /) -> Writer[bool, W]:
        return Writer(lambda: bmap(self(), pred))

    def fold_t[S](self, seed: S, folder: Folder[S, typing.Any], /) -> Writer[typing.Any, W]:
        """Fold through a nested Reader, Writer or State. See compose.fold_t."""
        from .compose import fold_t

        return fold_t(self, seed, folder)

    # Writer operations

    def with_log(self, *entries: W) -> Writer[T, W]:
        """Add entries to log without changing computation."""

        def wrapper() -> WriterResult[T, W]:
            wr = self()
            return WriterResult(wr.value, wr.log.combine(entries), wr.is_bottom)

        return Writer(wrapper)

    def listen(self) -> Writer[tuple[T, Log[W]], W]:
        """Get access to the log along with the value."""

        def wrapper() -> WriterResult[tuple[T, Log[W]], W]:
            wr = self()
            return bmap(wr, lambda value: (value, wr.log))

        return Writer(wrapper)

    def censor(self, f: Callable[[Log[W]], Log[W]], /) -> Writer[T, W]:
        """Modify the log after computation."""
        return self.map_log(f)

    # Accessors

    def evaluate(self) -> WriterResult[T, W]:
        """Run the computation."""
        return self._value()

    def values(self) -> Iterator[T]:
        """Zero values when bottom, exactly one otherwise. Never raises."""
        return iter(self())

    def unwrap(self) -> T:
        """Run and unwrap the value, raising BottomError. Loses the log!"""
        return self().unwrap()

    def unwrap_or(self, default: T, /) -> T:
        return self().unwrap_or(default)

    def to_lazy_coro_result[E](
        self,
        error: Callable[[], E],
        /,
    ) -> LazyCoroResult[tuple[T, Log[W]], E]:
        """Convert to kungfu LazyCoroResult, including log in success value."""

        async def wrapper() -> Result[tuple[T, Log[W]], E]:
            wr = self()
            if wr.is_bottom:
                return Error(error())
            return Ok((wr.value, wr.log))

        return LazyCoroResult(wrapper)

    # Protocol methods

    def __call__(self) -> WriterResult[T, W]:
        """Execute the lazy computation."""
        return self._value()

    def __add__(self, other: Writer[T, W], /) -> Writer[T, W]:
        """Append both values (see append.append), logs left to right."""
        from ..append import append

        def wrapper() -> WriterResult[T, W]:
            left = self()
            if left.is_bottom:
                return left
            right = other()
            log = left.log.combine(right.log)
            if right.is_bottom:
                return WriterResult.bottom(log)
            return WriterResult(append(left.value, right.value), log)

        return Writer(wrapper)

    def __repr__(self) -> str:
        return f"Writer({self._value!r})"

# Convenience Constructors
def writer_of[T, W](value: T, *log_entries: W) -> Writer[T, W]:
    """Create Active Writer with value and optional log entries."""

    def wrapper() -> WriterResult[T, W]:
        return WriterResult(value, Log.of(*log_entries))

    return Writer(wrapper)

def writer_bottom[W](*log_entries: W) -> Writer[typing.Any, W]:
    """Create bottom Writer with optional log entries."""
    return Writer.bottom(*log_entries)

__all__ = (
    "Writer",
    "writer_of",
    "writer_bottom",
)
