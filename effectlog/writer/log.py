"""
Log - моноидный аккумулятор для Writer
======================================
"""

from __future__ import annotations

from collections.abc import Iterable

class Log[A](list[A]):
    """
    Ordered log accumulated by Writer computations.

    A list with monoid operations:
    - empty: Log()
    - combine: concatenation, left entries first

    Monoid laws:
    - Left identity: Log().combine(x) == x
    - Right identity: x.combine(Log()) == x
    - Associativity: (x.combine(y)).combine(z) == x.combine(y.combine(z))

    combine/tell never mutate the receiver. WriterResult keeps its own copy.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Iterable[A], /) -> Log[A]:
        """
        Combine two logs (monoidal append).

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result

    def tell(self, item: A, /) -> Log[A]:
        """Append single item. Same as self.combine(Log.of(item))."""
        result: Log[A] = Log(self)
        result.append(item)
        return result

    def __repr__(self) -> str:
        return f"Log({list.__repr__(self)})"

__all__ = ("Log",)
