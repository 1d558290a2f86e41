from __future__ import annotations

class MissingLogError(TypeError):
    """WriterResult was constructed without a log."""

    def __init__(self) -> None:
        super().__init__("log must be a sequence, got None")

class BottomError(Exception):
    """Explicit unwrap of a short-circuited (bottom) result."""

    log: object

    def __init__(self, log: object = None) -> None:
        self.log = log
        super().__init__("Cannot unwrap a bottom result")

class CompositionError(TypeError):
    """select_many / fold_t got something that is not a Writer, Reader or State."""

    got: object

    def __init__(self, got: object) -> None:
        self.got = got
        super().__init__(f"Expected Writer, Reader or State, got {type(got).__name__}")

__all__ = ("BottomError", "CompositionError", "MissingLogError")
