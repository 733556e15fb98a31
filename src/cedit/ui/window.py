"""
Window management module for the editor UI.
"""

import curses
import logging
import time
from typing import Optional

from ..config import EditorConfig
from ..core.editor import Editor
from ..core.syntax import detect_language
from .theme import ERROR_PAIR, LINE_NUMBER_PAIR, STATUS_PAIR, Theme

logger = logging.getLogger(__name__)

KEY_HELP = "Ctrl-S: Save | Ctrl-Q: Quit"


def safe_addstr(window: 'curses.window', y: int, x: int, string: str, attr: int = 0) -> None:
    """Safely add a string to a window, truncating if necessary."""

    height, width = window.getmaxyx()
    if y >= height or x >= width or x < 0:
        return

    available = width - x
    if available <= 0:
        return

    if len(string) > available:
        string = string[:available]

    try:
        window.addstr(y, x, string, attr)
    except curses.error:
        pass


class WindowManager:
    """Manages the curses windows and draws the editor state."""

    LINE_NUMBER_WIDTH = 6
    MIN_HEIGHT = 2
    MIN_WIDTH = 20

    def __init__(self, stdscr: 'curses.window', editor: Editor, config: EditorConfig) -> None:
        self.stdscr = stdscr
        self.editor = editor
        self.config = config
        self.height, self.width = stdscr.getmaxyx()

        self.code_window: Optional['curses.window'] = None
        self.line_numbers_window: Optional['curses.window'] = None
        self.status_window: Optional['curses.window'] = None
        self.status_message: Optional[str] = None
        self.status_message_time = 0.0

        self.theme = Theme(config.colors)
        self.theme.init_colors()

        self.setup_windows()

    @property
    def gutter_width(self) -> int:
        return self.LINE_NUMBER_WIDTH if self.config.show_line_numbers else 0

    @property
    def text_rows(self) -> int:
        return max(1, self.height - 1)

    @property
    def text_cols(self) -> int:
        return max(1, self.width - self.gutter_width)

    def setup_windows(self) -> None:
        """Create and position all windows."""

        if self.height < self.MIN_HEIGHT or self.width < self.MIN_WIDTH:
            self.code_window = None
            self.line_numbers_window = None
            self.status_window = None
            return

        self.line_numbers_window = None
        if self.gutter_width:
            self.line_numbers_window = curses.newwin(self.text_rows, self.gutter_width, 0, 0)

        self.code_window = curses.newwin(self.text_rows, self.text_cols, 0, self.gutter_width)
        self.status_window = curses.newwin(1, self.width, self.height - 1, 0)

    def set_status(self, message: str) -> None:
        self.status_message = message
        self.status_message_time = 0.0

    def refresh_all(self) -> None:
        """Scroll to the cursor and redraw every window."""

        self.editor.scroll_to_cursor(self.text_rows, self.text_cols)

        self.draw_line_numbers()
        self.draw_code_view()
        self.draw_status()
        curses.doupdate()

    def draw_line_numbers(self) -> None:
        """Draw line numbers next to the code view."""

        if not self.line_numbers_window:
            return

        self.line_numbers_window.erase()

        top = self.editor.scroll_top
        for i in range(self.text_rows):
            line_num = top + i
            if line_num >= self.editor.line_count:
                break

            attr = curses.color_pair(LINE_NUMBER_PAIR)
            if line_num == self.editor.cursor.row:
                attr |= curses.A_BOLD

            safe_addstr(self.line_numbers_window, i, 0, f"{line_num + 1:4d} ", attr)

        self.line_numbers_window.noutrefresh()

    def draw_code_view(self) -> None:
        """Draw the visible lines with syntax highlighting and the cursor."""

        if not self.code_window:
            return

        self.code_window.erase()

        editor = self.editor
        left = editor.scroll_left
        right = left + self.text_cols

        for row, spans in editor.visible_tokens(self.text_rows):
            line = editor.get_line(row)
            y = row - editor.scroll_top

            for span in spans:
                start = max(span.start, left)
                end = min(span.end, right)
                if start >= end:
                    continue

                text = line[start:end].replace('\t', ' ')
                safe_addstr(self.code_window, y, start - left, text, self.theme.attr(span.category))

        cursor = editor.cursor
        line = editor.get_line(cursor.row)
        under_cursor = line[cursor.col] if cursor.col < len(line) else ' '
        if under_cursor == '\t':
            under_cursor = ' '

        safe_addstr(
            self.code_window,
            cursor.row - editor.scroll_top,
            cursor.col - left,
            under_cursor,
            curses.A_REVERSE,
        )

        self.code_window.noutrefresh()

    def draw_status(self) -> None:
        """Draw the status bar."""

        if not self.status_window:
            return

        self.status_window.erase()
        base_attr = curses.color_pair(STATUS_PAIR) | curses.A_BOLD | curses.A_REVERSE

        if self.status_message:
            if self.status_message_time == 0:
                self.status_message_time = time.time()
            elif time.time() - self.status_message_time > self.config.status_message_duration:
                self.status_message = None
                self.status_message_time = 0.0

        if self.status_message:
            attr = base_attr
            if self.status_message.startswith("Error:"):
                attr = curses.color_pair(ERROR_PAIR) | curses.A_BOLD | curses.A_REVERSE

            safe_addstr(self.status_window, 0, 0, (" " + self.status_message).ljust(self.width), attr)
            self.status_window.noutrefresh()
            return

        editor = self.editor
        status = f" {KEY_HELP} | {editor.display_name} "

        language = detect_language(editor.filename)
        if language:
            status += f"[{language}] "

        status += f"[{editor.line_count} lines] "

        if editor.modified:
            status += "[Modified] "

        pos_info = f"Line: {editor.cursor.row + 1} Col: {editor.cursor.col + 1}"

        available_width = self.width - len(pos_info) - 1
        if len(status) > available_width:
            status = status[:max(0, available_width - 4)] + "... "
        else:
            status += " " * (available_width - len(status))

        safe_addstr(self.status_window, 0, 0, status + pos_info, base_attr)
        self.status_window.noutrefresh()

    def resize(self) -> None:
        """Handle terminal resize events."""

        self.height, self.width = self.stdscr.getmaxyx()
        self.stdscr.clear()
        self.stdscr.noutrefresh()

        if self.height < self.MIN_HEIGHT or self.width < self.MIN_WIDTH:
            logger.warning("Terminal too small: %dx%d", self.width, self.height)

        self.setup_windows()
