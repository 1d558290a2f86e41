"""
Writer Monad
============

Writer - отложенное вычисление:
- Lazy (отложенные вычисления)
- Bottom (короткое замыкание по фильтру)
- Writer[Log[W]] (аккумуляция логов)

Composes with Reader and State through select_many / fold_t.
"""

from .log import Log
from .result import WriterResult
from .monad import Writer, writer_bottom, writer_of
from .compose import fold_t, select_many

__all__ = (
    "Log",
    "WriterResult",
    "Writer",
    "writer_of",
    "writer_bottom",
    "select_many",
    "fold_t",
)
