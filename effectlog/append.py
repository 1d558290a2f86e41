"""
Append - semigroup combine for plain values
===========================================

Used by ``Writer.__add__`` and handy for folding values into logs.

- None is the identity (an absent optional value)
- numbers add
- str, list, tuple concatenate
- set, frozenset union
- anything with ``combine`` (e.g. Log) combines
- kungfu Ok + Ok appends the values, the first Error wins
"""

from __future__ import annotations

import typing
from collections.abc import Iterable
from numbers import Number

from kungfu import Error, Ok

def append(x: typing.Any, y: typing.Any, /) -> typing.Any:
    """
    Combine two values of the same kind.

    Example:
        append(10, 20)                # 30
        append("Hello", " World")     # "Hello World"
        append({1, 2, 3}, {2, 3, 4})  # {1, 2, 3, 4}
        append(None, [1])             # [1]
    """
    if x is None:
        return y
    if y is None:
        return x
    match (x, y):
        case (Ok(a), Ok(b)):
            return Ok(append(a, b))
        case (Error(_), _):
            return x
        case (_, Error(_)):
            return y
        case _ if hasattr(x, "combine"):
            return x.combine(y)
        case (Number(), Number()):
            return x + y
        case (str(), str()) | (list(), list()) | (tuple(), tuple()):
            return x + y
        case (set() | frozenset(), set() | frozenset()):
            return x | y
        case _:
            raise TypeError(
                f"Cannot append {type(x).__name__} and {type(y).__name__}"
            )

def concat(items: Iterable[typing.Any], /) -> typing.Any:
    """Fold ``append`` over items. Empty input gives None."""
    acc: typing.Any = None
    for item in items:
        acc = append(acc, item)
    return acc

__all__ = ("append", "concat")
