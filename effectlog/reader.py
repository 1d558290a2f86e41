"""
Reader - environment-dependent computation
==========================================

Sibling effect of Writer: a computation that reads an environment and
produces a value, or short-circuits (bottom) the same way Writer does.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from ._errors import BottomError
from ._types import Folder, Predicate

class ReaderResult[T]:
    """Outcome of running a Reader: value plus bottom flag."""

    __slots__ = ("_value", "_is_bottom")
    __match_args__ = ("_value", "_is_bottom")

    def __init__(self, value: T, is_bottom: bool = False) -> None:
        self._value = value
        self._is_bottom = is_bottom

    @staticmethod
    def bottom[V]() -> ReaderResult[V]:
        return ReaderResult(None, True)  # type: ignore[arg-type]

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
        if not isinstance(other, ReaderResult):
            return NotImplemented
        return (self._value, self._is_bottom) == (other._value, other._is_bottom)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._is_bottom:
            return "ReaderResult(<bottom>)"
        return f"ReaderResult({self._value!r})"

class Reader[E, T]:
    """
    Reader monad: ``env -> ReaderResult[T]``.

    Monadic laws:
    - Left identity: pure(a).bind(f) ≡ f(a)
    - Right identity: m.bind(pure) ≡ m
    - Associativity: m.bind(f).bind(g) ≡ m.bind(x => f(x).bind(g))
    """

    __slots__ = ("_run",)

    def __init__(self, run: Callable[[E], ReaderResult[T]], /) -> None:
        self._run = run

    @staticmethod
    def pure[V](value: V) -> Reader[object, V]:
        """Ignore the environment and produce ``value``."""
        return Reader(lambda _env: ReaderResult(value))

    @staticmethod
    def ask[Env]() -> Reader[Env, Env]:
        """Produce the environment itself."""
        return Reader(lambda env: ReaderResult(env))

    @staticmethod
    def asks[Env, V](f: Callable[[Env], V], /) -> Reader[Env, V]:
        """Produce a projection of the environment."""
        return Reader(lambda env: ReaderResult(f(env)))

    def run_with(self, env: E, /) -> ReaderResult[T]:
        return self._run(env)

    def __call__(self, env: E, /) -> ReaderResult[T]:
        return self._run(env)

    def map[U](self, f: Callable[[T], U], /) -> Reader[E, U]:
        def run(env: E) -> ReaderResult[U]:
            res = self._run(env)
            if res.is_bottom:
                return ReaderResult.bottom()
            return ReaderResult(f(res.value))

        return Reader(run)

    def bind[U](self, f: Callable[[T], Reader[E, U]], /) -> Reader[E, U]:
        """Monadic bind. Bottom short-circuits, ``f`` is not called."""

        def run(env: E) -> ReaderResult[U]:
            res = self._run(env)
            if res.is_bottom:
                return ReaderResult.bottom()
            return f(res.value).run_with(env)

        return Reader(run)

    def filter(self, pred: Predicate[T], /) -> Reader[E, T]:
        def run(env: E) -> ReaderResult[T]:
            res = self._run(env)
            if res.is_bottom:
                return res
            return ReaderResult(res.value, not pred(res.value))

        return Reader(run)

    where = filter

    def fold[S](self, seed: S, folder: Folder[S, T], /) -> Reader[E, S]:
        def run(env: E) -> ReaderResult[S]:
            res = self._run(env)
            if res.is_bottom:
                return ReaderResult.bottom()
            return ReaderResult(folder(seed, res.value))

        return Reader(run)

    def local[Outer](self, f: Callable[[Outer], E], /) -> Reader[Outer, T]:
        """Run against an environment derived from the outer one."""
        return Reader(lambda env: self._run(f(env)))

__all__ = ("Reader", "ReaderResult")
