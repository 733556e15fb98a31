"""
Abstract editing events, independent of any key encoding.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class EventKind(Enum):
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_HOME = auto()
    MOVE_END = auto()
    INSERT_CHAR = auto()
    SPLIT_LINE = auto()
    DELETE_BEFORE = auto()
    SAVE = auto()
    QUIT = auto()


MOVEMENTS = frozenset({
    EventKind.MOVE_UP,
    EventKind.MOVE_DOWN,
    EventKind.MOVE_LEFT,
    EventKind.MOVE_RIGHT,
    EventKind.MOVE_HOME,
    EventKind.MOVE_END,
})


@dataclass(frozen=True)
class EditEvent:
    """A single editing request. ``char`` is set for INSERT_CHAR only."""

    kind: EventKind
    char: Optional[str] = None

    @classmethod
    def insert(cls, char: str) -> 'EditEvent':
        return cls(EventKind.INSERT_CHAR, char)
