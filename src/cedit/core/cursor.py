"""
Cursor position bookkeeping for the line buffer.
"""

from dataclasses import dataclass
from typing import Tuple

from .buffer import LineStore


@dataclass
class Cursor:
    """Row/column position kept inside the bounds of a LineStore."""

    row: int = 0
    col: int = 0

    @property
    def position(self) -> Tuple[int, int]:
        return self.row, self.col

    def set(self, row: int, col: int, lines: LineStore) -> None:
        """Move to the given position, clamped to the content."""

        self.row = row
        self.col = col
        self.clamp(lines)

    def reset(self) -> None:
        self.row = 0
        self.col = 0

    def clamp(self, lines: LineStore) -> None:
        """Pull the cursor back inside the buffer after any change."""

        self.row = max(0, min(self.row, lines.line_count - 1))
        self.col = max(0, min(self.col, len(lines.get_line(self.row))))

    def move_up(self, lines: LineStore) -> None:
        if self.row > 0:
            self.row -= 1
            self.clamp(lines)

    def move_down(self, lines: LineStore) -> None:
        if self.row < lines.line_count - 1:
            self.row += 1
            self.clamp(lines)

    def move_left(self, lines: LineStore) -> None:
        if self.col > 0:
            self.col -= 1

    def move_right(self, lines: LineStore) -> None:
        if self.col < len(lines.get_line(self.row)):
            self.col += 1

    def move_home(self, lines: LineStore) -> None:
        self.col = 0

    def move_end(self, lines: LineStore) -> None:
        self.col = len(lines.get_line(self.row))
