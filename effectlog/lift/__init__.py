"""
Lift helpers with semantic namespaces.

Supports three import styles:
    from effectlog import lift as L   # Recommended
    from effectlog import lift as _   # Minimal
    from effectlog import lift        # Explicit

Architecture:
- L.up.*    - подъем значений в Writer
- L.down.*  - опускание Writer в значение
- L.call()  - вызов функций с лифтингом

Examples:
    from effectlog import lift as L

    w = L.up.pure(User(id=42), log=["loaded"])
    maybe = L.up.optional(db_result)

    @L.lifted
    def fetch(user_id: int) -> WriterResult[User, str]: ...

    value, log = L.down.unsafe(fetch(42))
"""

from __future__ import annotations

# Import namespaces
from . import down as down_ns
from . import up as up_ns

# From up namespace
from .up import bottom, from_result, optional, pure, tell

# From call namespace
from .call import call, lifted

# From down namespace
from .down import evaluate, or_else, to_tuple, unsafe

# Namespace aliases: L.up.*, L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "pure",
    "tell",
    "bottom",
    "from_result",
    "optional",
    # Call
    "call",
    "lifted",
    # Down
    "evaluate",
    "to_tuple",
    "unsafe",
    "or_else",
)
