from __future__ import annotations

import typing
from collections.abc import Callable

import pytest


class Recorder:
    """Wraps a function and records every argument tuple it was called with."""

    def __init__(self) -> None:
        self.calls: list[tuple[typing.Any, ...]] = []

    def wrap[R](self, func: Callable[..., R]) -> Callable[..., R]:
        def recorded(*args: typing.Any) -> R:
            self.calls.append(args)
            return func(*args)

        return recorded

    @property
    def called(self) -> bool:
        return bool(self.calls)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
