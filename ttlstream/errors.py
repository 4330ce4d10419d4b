"""Exceptions raised by the load drivers.

The classifier and the accumulator never raise for bad input; these are
raised only by callers that opted into a strict policy.
"""


class TurtleLoadError(ValueError):
    """Base class for load failures caused by the input's content."""


class NotATurtleError(TurtleLoadError):
    """Raised when unrecognized lines are treated as fatal."""

    def __init__(self, line_number: int, line: str, message: str | None = None):
        super().__init__(message or f"line {line_number} is not a turtle statement: {line!r}")
        self.line_number = line_number
        self.line = line


class TruncatedInputError(TurtleLoadError):
    """Raised when a strict caller rejects input that ended inside a statement."""

    def __init__(self, discarded: int):
        super().__init__(f"input ended inside a statement ({discarded} discarded)")
        self.discarded = discarded
