"""Collection operations over many Writers."""

from .fold import fold
from .sequence import sequence
from .traverse import traverse

__all__ = ("fold", "sequence", "traverse")
