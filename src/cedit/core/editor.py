"""
Editor state: the line buffer, cursor, file binding and view offsets.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from .buffer import DEFAULT_MAX_COLS, DEFAULT_MAX_LINES, LineStore
from .cursor import Cursor
from .errors import EditorError, EditResult
from .events import MOVEMENTS, EditEvent, EventKind
from .persistence import load_lines, save_lines
from .syntax import Span, comment_state_before, highlight_line, highlight_lines

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = 'untitled.txt'


class Editor:
    """Owns one document and applies editing events to it.

    Every mutating or persistence call returns an :class:`EditResult`, so
    the UI can tell the user when an edit was refused or a save failed.
    """

    def __init__(
        self,
        max_lines: int = DEFAULT_MAX_LINES,
        max_cols: int = DEFAULT_MAX_COLS,
        default_filename: str = DEFAULT_FILENAME,
    ) -> None:
        self.lines = LineStore(max_lines=max_lines, max_cols=max_cols)
        self.cursor = Cursor()
        self.filename: Optional[str] = None
        self.default_filename = default_filename
        self.modified = False
        self.scroll_top = 0
        self.scroll_left = 0

        self._handlers: Dict[EventKind, Callable[[EditEvent], EditResult]] = {
            EventKind.INSERT_CHAR: self._insert_char,
            EventKind.SPLIT_LINE: self._split_line,
            EventKind.DELETE_BEFORE: self._delete_before,
            EventKind.SAVE: lambda event: self.save(),
        }

    @property
    def line_count(self) -> int:
        return self.lines.line_count

    def get_line(self, row: int) -> str:
        return self.lines.get_line(row)

    @property
    def display_name(self) -> str:
        return self.filename or self.default_filename

    def apply(self, event: EditEvent) -> EditResult:
        """Apply one editing event and report the outcome."""

        if event.kind in MOVEMENTS:
            self._move(event.kind)
            return EditResult()

        handler = self._handlers.get(event.kind)
        if handler is None:
            return EditResult()

        try:
            return handler(event)
        except EditorError as e:
            logger.warning("%s rejected: %s", event.kind.name, e)
            return EditResult.from_error(e)

    def _move(self, kind: EventKind) -> None:
        moves = {
            EventKind.MOVE_UP: self.cursor.move_up,
            EventKind.MOVE_DOWN: self.cursor.move_down,
            EventKind.MOVE_LEFT: self.cursor.move_left,
            EventKind.MOVE_RIGHT: self.cursor.move_right,
            EventKind.MOVE_HOME: self.cursor.move_home,
            EventKind.MOVE_END: self.cursor.move_end,
        }
        moves[kind](self.lines)

    def _insert_char(self, event: EditEvent) -> EditResult:
        if not event.char:
            return EditResult()

        row, col = self.lines.insert_char(self.cursor.row, self.cursor.col, event.char)
        return self._after_edit(row, col)

    def _split_line(self, event: EditEvent) -> EditResult:
        row, col = self.lines.split_line(self.cursor.row, self.cursor.col)
        return self._after_edit(row, col)

    def _delete_before(self, event: EditEvent) -> EditResult:
        if self.cursor.position == (0, 0):
            return EditResult()

        row, col = self.lines.delete_char_before(self.cursor.row, self.cursor.col)
        return self._after_edit(row, col)

    def _after_edit(self, row: int, col: int) -> EditResult:
        self.cursor.set(row, col, self.lines)
        self.modified = True
        return EditResult()

    def load(self, filename: str) -> EditResult:
        """Replace the buffer with the contents of a file."""

        try:
            lines = load_lines(filename, self.lines.max_lines, self.lines.max_cols)
            self.lines.replace_all(lines)
        except EditorError as e:
            return EditResult.from_error(e)

        self.filename = filename
        self.cursor.reset()
        self.scroll_top = 0
        self.scroll_left = 0
        self.modified = False
        return EditResult()

    def save(self, filename: Optional[str] = None) -> EditResult:
        """
        Save the buffer to a file.

        Args:
            filename: Optional filename to save to. If None, uses the current
                filename or the default one.

        Returns:
            The outcome; the buffer is left unchanged on failure
        """

        target = filename or self.filename or self.default_filename

        try:
            save_lines(target, self.lines)
        except EditorError as e:
            return EditResult.from_error(e)

        self.filename = target
        self.modified = False
        return EditResult(message=f"Saved: {target}")

    def scroll_to_cursor(self, rows: int, cols: int) -> None:
        """Shift the view so the cursor is inside a ``rows`` x ``cols`` window."""

        if self.cursor.row < self.scroll_top:
            self.scroll_top = self.cursor.row
        elif rows > 0 and self.cursor.row >= self.scroll_top + rows:
            self.scroll_top = self.cursor.row - rows + 1

        if self.cursor.col < self.scroll_left:
            self.scroll_left = self.cursor.col
        elif cols > 0 and self.cursor.col >= self.scroll_left + cols:
            self.scroll_left = self.cursor.col - cols + 1

    def highlight(self, row: int, in_comment: Optional[bool] = None) -> Tuple[List[Span], bool]:
        """Highlight one line, replaying the lines above when no state is given."""

        if in_comment is None:
            in_comment = comment_state_before(self.lines, row)

        return highlight_line(self.lines.get_line(row), in_comment)

    def visible_tokens(self, rows: int) -> List[Tuple[int, List[Span]]]:
        """Highlighted spans of the lines shown from ``scroll_top``."""

        stop = min(self.scroll_top + rows, self.line_count)
        return list(highlight_lines(self.lines, self.scroll_top, stop))
