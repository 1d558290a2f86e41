"""
State - state-threading computation
===================================

Sibling effect of Writer. A bottom StateResult carries the state at the
point where the computation short-circuited.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterator

from ._errors import BottomError
from ._types import Folder, Predicate

class StateResult[S, T]:
    """Outcome of running a State: updated state, value, bottom flag."""

    __slots__ = ("_state", "_value", "_is_bottom")
    __match_args__ = ("_state", "_value", "_is_bottom")

    def __init__(self, state: S, value: T, is_bottom: bool = False) -> None:
        self._state = state
        self._value = value
        self._is_bottom = is_bottom

    @staticmethod
    def bottom[St, V](state: St) -> StateResult[St, V]:
        return StateResult(state, None, True)  # type: ignore[arg-type]

    @property
    def state(self) -> S:
        return self._state

    @property
    def value(self) -> T:
        return self._value

    @property
    def is_bottom(self) -> bool:
        return self._is_bottom

    def unwrap(self) -> T:
        if self._is_bottom:
            raise BottomError()
        return self._value

    def unwrap_or(self, default: T, /) -> T:
        return default if self._is_bottom else self._value

    def __iter__(self) -> Iterator[T]:
        if not self._is_bottom:
            yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StateResult):
            return NotImplemented
        return (self._state, self._value, self._is_bottom) == (
            other._state,
            other._value,
            other._is_bottom,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._is_bottom:
            return f"StateResult(<bottom>, state={self._state!r})"
        return f"StateResult({self._value!r}, state={self._state!r})"

class State[S, T]:
    """
    State monad: ``state -> StateResult[S, T]``.

    Monadic laws:
    - Left identity: pure(a).bind(f) ≡ f(a)
    - Right identity: m.bind(pure) ≡ m
    - Associativity: m.bind(f).bind(g) ≡ m.bind(x => f(x).bind(g))
    """

    __slots__ = ("_run",)

    def __init__(self, run: Callable[[S], StateResult[S, T]], /) -> None:
        self._run = run

    @staticmethod
    def pure[V](value: V) -> State[typing.Any, V]:
        """Produce ``value``, state untouched."""
        return State(lambda s: StateResult(s, value))

    @staticmethod
    def get[St]() -> State[St, St]:
        return State(lambda s: StateResult(s, s))

    @staticmethod
    def gets[St, V](f: Callable[[St], V], /) -> State[St, V]:
        return State(lambda s: StateResult(s, f(s)))

    @staticmethod
    def put[St](new_state: St, /) -> State[St, None]:
        return State(lambda _s: StateResult(new_state, None))

    @staticmethod
    def modify[St](f: Callable[[St], St], /) -> State[St, None]:
        return State(lambda s: StateResult(f(s), None))

    def run_with(self, state: S, /) -> StateResult[S, T]:
        return self._run(state)

    def __call__(self, state: S, /) -> StateResult[S, T]:
        return self._run(state)

    def map[U](self, f: Callable[[T], U], /) -> State[S, U]:
        def run(state: S) -> StateResult[S, U]:
            res = self._run(state)
            if res.is_bottom:
                return StateResult.bottom(res.state)
            return StateResult(res.state, f(res.value))

        return State(run)

    def bind[U](self, f: Callable[[T], State[S, U]], /) -> State[S, U]:
        """Monadic bind. State flows from the first step into the second."""

        def run(state: S) -> StateResult[S, U]:
            res = self._run(state)
            if res.is_bottom:
                return StateResult.bottom(res.state)
            return f(res.value).run_with(res.state)

        return State(run)

    def filter(self, pred: Predicate[T], /) -> State[S, T]:
        def run(state: S) -> StateResult[S, T]:
            res = self._run(state)
            if res.is_bottom:
                return res
            return StateResult(res.state, res.value, not pred(res.value))

        return State(run)

    where = filter

    def fold[A](self, seed: A, folder: Folder[A, T], /) -> State[S, A]:
        def run(state: S) -> StateResult[S, A]:
            res = self._run(state)
            if res.is_bottom:
                return StateResult.bottom(res.state)
            return StateResult(res.state, folder(seed, res.value))

        return State(run)

__all__ = ("State", "StateResult")
