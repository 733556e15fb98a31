"""
Buffer module holding the editable lines of a document.
"""

import logging
from typing import Final, Iterable, Iterator, List, Tuple

from .errors import CapacityExceeded

logger = logging.getLogger(__name__)

DEFAULT_MAX_LINES: Final[int] = 1000
DEFAULT_MAX_COLS: Final[int] = 1000

LINE_TERMINATORS: Final[str] = '\r\n'

Position = Tuple[int, int]  # (row, column)


class LineStore:
    """Ordered list of text lines with cursor-relative editing operations.

    The store never holds fewer than one line. Every operation that would
    push a line past ``max_cols`` characters or the store past ``max_lines``
    lines raises :class:`CapacityExceeded` and leaves the content untouched.
    Editing operations return the cursor position that follows the edit.
    """

    def __init__(
        self,
        lines: Iterable[str] = ('',),
        max_lines: int = DEFAULT_MAX_LINES,
        max_cols: int = DEFAULT_MAX_COLS,
    ) -> None:
        if max_lines < 1 or max_cols < 1:
            raise ValueError("Line limits must be positive")

        self.max_lines = max_lines
        self.max_cols = max_cols
        self._lines: List[str] = ['']
        self.replace_all(lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._lines))

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, row: int) -> str:
        """Get the text of a line."""

        self._check_row(row)
        return self._lines[row]

    def snapshot(self) -> Tuple[str, ...]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def replace_all(self, lines: Iterable[str]) -> None:
        """Replace the whole content, keeping at least one line."""

        new_lines = list(lines) or ['']

        if len(new_lines) > self.max_lines:
            raise CapacityExceeded(
                f"{len(new_lines)} lines exceed the limit of {self.max_lines}",
                limit='max_lines',
                value=len(new_lines),
            )

        for line in new_lines:
            _check_text(line)
            if len(line) > self.max_cols:
                raise CapacityExceeded(
                    f"Line of {len(line)} characters exceeds the limit of {self.max_cols}",
                    limit='max_cols',
                    value=len(line),
                )

        self._lines = new_lines

    def insert_char(self, row: int, col: int, ch: str) -> Position:
        """Insert a character at the given position, shifting the rest right."""

        if len(ch) != 1 or ch in LINE_TERMINATORS:
            raise ValueError(f"Cannot insert {ch!r} into a line")

        self._check_position(row, col)
        line = self._lines[row]

        if len(line) >= self.max_cols:
            logger.debug("Rejected insert at (%d,%d): line is full", row, col)
            raise CapacityExceeded(
                f"Line {row + 1} is at the limit of {self.max_cols} columns",
                limit='max_cols',
                value=len(line) + 1,
            )

        self._lines[row] = line[:col] + ch + line[col:]
        return row, col + 1

    def delete_char_before(self, row: int, col: int) -> Position:
        """
        Delete the character before the given position.

        At the start of a line the line is merged onto the end of the previous
        one. A merge that would overflow the previous line is refused rather
        than truncated.

        Args:
            row: Line index
            col: Column of the cursor

        Returns:
            The cursor position after the deletion
        """

        self._check_position(row, col)

        if col > 0:
            line = self._lines[row]
            self._lines[row] = line[:col - 1] + line[col:]
            return row, col - 1

        if row == 0:
            return row, col

        prev_line = self._lines[row - 1]
        current_line = self._lines[row]
        merged_length = len(prev_line) + len(current_line)

        if merged_length > self.max_cols:
            logger.debug("Rejected merge of line %d: %d columns", row, merged_length)
            raise CapacityExceeded(
                f"Joining lines {row} and {row + 1} would exceed {self.max_cols} columns",
                limit='max_cols',
                value=merged_length,
            )

        self._lines[row - 1] = prev_line + current_line
        del self._lines[row]

        return row - 1, len(prev_line)

    def split_line(self, row: int, col: int) -> Position:
        """Split a line at the given column, moving the tail to a new line below."""

        self._check_position(row, col)

        if len(self._lines) >= self.max_lines:
            logger.debug("Rejected split at (%d,%d): buffer is full", row, col)
            raise CapacityExceeded(
                f"Buffer is at the limit of {self.max_lines} lines",
                limit='max_lines',
                value=len(self._lines) + 1,
            )

        line = self._lines[row]
        head, tail = line[:col], line[col:]

        self._lines.insert(row + 1, tail)
        self._lines[row] = head

        return row + 1, 0

    def _check_row(self, row: int) -> None:
        if not 0 <= row < len(self._lines):
            raise IndexError(f"Row {row} out of range")

    def _check_position(self, row: int, col: int) -> None:
        self._check_row(row)
        if not 0 <= col <= len(self._lines[row]):
            raise IndexError(f"Column {col} out of range for row {row}")


def _check_text(line: str) -> None:
    if any(ch in line for ch in LINE_TERMINATORS):
        raise ValueError("Lines cannot contain line terminators")
