"""
Cross-effect composition
========================

Writer composed with a Reader, a Writer or a State. The inner effect is not
known until the outer Writer has produced its value, so both combinators
dispatch on it at evaluation time:

- select_many: Writer[T] + (T -> Reader | Writer | State)[U] + project(T, U)
- fold_t: Writer[Reader | Writer | State] folded from inside

A bottom outer Writer short-circuits before anything inner is touched.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable

from .._errors import CompositionError
from .._types import Folder, Projection
from ..reader import Reader, ReaderResult
from ..state import State, StateResult
from .monad import Writer
from .result import WriterResult

logger = logging.getLogger(__name__)

def select_many[T, U, V, W](
    writer: Writer[T, W],
    bind: Callable[[T], typing.Any],
    project: Projection[T, U, V],
) -> Writer[typing.Any, W]:
    """
    Two-step composition keyed on the effect ``bind`` returns.

    - Writer: Writer[V]. Logs concatenate; bottom from either step wins.
    - Reader: Writer[Reader[E, V]]. The Reader runs the inner one with its
      env; inner bottom gives a bottom ReaderResult.
    - State: Writer[State[S, V]]. Inner bottom gives a bottom StateResult
      carrying the input state, otherwise the inner's updated state.
    """

    def wrapper() -> WriterResult[typing.Any, W]:
        wr = writer()
        if wr.is_bottom:
            return WriterResult.bottom(wr.log)
        value = wr.value
        inner = bind(value)
        logger.debug("select_many dispatching on %s", type(inner).__name__)
        match inner:
            case Writer():
                inner_wr = inner()
                log = wr.log.combine(inner_wr.log)
                if inner_wr.is_bottom:
                    return WriterResult.bottom(log)
                return WriterResult(project(value, inner_wr.value), log)
            case Reader():
                return WriterResult(_project_reader(value, inner, project), wr.log)
            case State():
                return WriterResult(_project_state(value, inner, project), wr.log)
            case _:
                raise CompositionError(inner)

    return Writer(wrapper)

def _project_reader[E, T, U, V](
    value: T,
    inner: Reader[E, U],
    project: Projection[T, U, V],
) -> Reader[E, V]:
    def run(env: E) -> ReaderResult[V]:
        res = inner.run_with(env)
        if res.is_bottom:
            return ReaderResult.bottom()
        return ReaderResult(project(value, res.value))

    return Reader(run)

def _project_state[S, T, U, V](
    value: T,
    inner: State[S, U],
    project: Projection[T, U, V],
) -> State[S, V]:
    def run(state: S) -> StateResult[S, V]:
        res = inner.run_with(state)
        if res.is_bottom:
            return StateResult.bottom(state)
        return StateResult(res.state, project(value, res.value))

    return State(run)

def fold_t[S, W](
    writer: Writer[typing.Any, W],
    seed: S,
    folder: Folder[S, typing.Any],
) -> Writer[typing.Any, W]:
    """
    Fold inside the effect held by ``writer`` without collapsing its log.

    - Writer[Reader[E, T]] -> Writer[Reader[E, S]]
    - Writer[Writer[T]]    -> Writer[S], inner log appended to the outer one
    - Writer[State[St, T]] -> Writer[State[St, S]]
    """

    def wrapper() -> WriterResult[typing.Any, W]:
        wr = writer()
        if wr.is_bottom:
            return WriterResult.bottom(wr.log)
        match wr.value:
            case Writer() as inner:
                inner_wr = inner.fold(seed, folder)()
                return WriterResult(
                    inner_wr.value,
                    wr.log.combine(inner_wr.log),
                    inner_wr.is_bottom,
                )
            case Reader() | State() as inner:
                return WriterResult(inner.fold(seed, folder), wr.log)
            case other:
                raise CompositionError(other)

    return Writer(wrapper)

__all__ = ("select_many", "fold_t")
