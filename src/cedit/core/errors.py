"""
Error types and edit outcomes reported by the editor core.
"""

from dataclasses import dataclass
from enum import Enum


class EditorError(Exception):
    """Base class for conditions the editor reports to the user."""


class CapacityExceeded(EditorError):
    """Raised when an edit would break the line count or line length limit."""

    def __init__(self, message: str, *, limit: str, value: int) -> None:
        super().__init__(message)
        self.limit = limit
        self.value = value


class IoFailure(EditorError, OSError):
    """Raised when the backing file cannot be opened, read or written."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class Outcome(Enum):
    """Result kinds returned for every mutating or persistence call."""

    OK = 'ok'
    CAPACITY_EXCEEDED = 'capacity_exceeded'
    IO_FAILURE = 'io_failure'


@dataclass(frozen=True)
class EditResult:
    """Outcome of an editor call plus a message fit for the status line."""

    outcome: Outcome = Outcome.OK
    message: str = ''

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK

    @classmethod
    def from_error(cls, error: EditorError) -> 'EditResult':
        if isinstance(error, CapacityExceeded):
            return cls(Outcome.CAPACITY_EXCEEDED, str(error))

        return cls(Outcome.IO_FAILURE, str(error))
