"""
Writer effect-log computations for Python.

A Writer is a deferred computation producing a value together with an
ordered log, or short-circuiting ("bottom") when a filter rejects its value.
It composes with the sibling Reader and State effects.

Architecture:
- writer: Log, WriterResult, Writer and cross-effect composition
- reader / state: sibling effects
- lift: L.up.* / L.down.* / L.call helpers
- collection: traverse / sequence / fold over many Writers
"""

import logging

# Core types
from ._types import Folder, Predicate, Projection, Unit

# Writer monad
from . import writer
from .writer import Log, Writer, WriterResult, fold_t, select_many, writer_bottom, writer_of

# Sibling effects
from .reader import Reader, ReaderResult
from .state import State, StateResult

# Lift helpers
from . import lift

# Collection operations
from . import collection
from .collection import sequence, traverse

# Semigroup append
from .append import append, concat

# Errors
from ._errors import BottomError, CompositionError, MissingLogError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Folder",
    "Predicate",
    "Projection",
    "Unit",
    # Writer
    "writer",
    "Log",
    "Writer",
    "WriterResult",
    "writer_of",
    "writer_bottom",
    "select_many",
    "fold_t",
    # Sibling effects
    "Reader",
    "ReaderResult",
    "State",
    "StateResult",
    # Lift module
    "lift",
    # Collection
    "collection",
    "sequence",
    "traverse",
    # Append
    "append",
    "concat",
    # Errors
    "BottomError",
    "CompositionError",
    "MissingLogError",
)
