"""
Input handler module for processing keyboard events.
"""

import curses
import logging
from typing import Dict, Final, Optional

from ..core.editor import Editor
from ..core.errors import EditResult
from ..core.events import EditEvent, EventKind

logger = logging.getLogger(__name__)

UNSAVED_CHANGES_STATUS_MESSAGE: Final[str] = "Buffer has unsaved changes. Press Ctrl-S to save or Ctrl-Q again to quit."

KEY_EVENTS: Final[Dict[int, EventKind]] = {
    curses.KEY_UP: EventKind.MOVE_UP,
    curses.KEY_DOWN: EventKind.MOVE_DOWN,
    curses.KEY_LEFT: EventKind.MOVE_LEFT,
    curses.KEY_RIGHT: EventKind.MOVE_RIGHT,
    curses.KEY_HOME: EventKind.MOVE_HOME,
    curses.KEY_END: EventKind.MOVE_END,

    ord('\n'): EventKind.SPLIT_LINE,
    ord('\r'): EventKind.SPLIT_LINE,
    curses.KEY_ENTER: EventKind.SPLIT_LINE,

    curses.KEY_BACKSPACE: EventKind.DELETE_BEFORE,
    127: EventKind.DELETE_BEFORE,
    ord('h') & 0x1f: EventKind.DELETE_BEFORE,  # Ctrl + H

    ord('s') & 0x1f: EventKind.SAVE,  # Ctrl + S
    ord('q') & 0x1f: EventKind.QUIT,  # Ctrl + Q
}


def translate_key(ch: int) -> Optional[EditEvent]:
    """Map a curses key code to an editing event, or None if it has no binding."""

    if 32 <= ch <= 126:
        return EditEvent.insert(chr(ch))

    kind = KEY_EVENTS.get(ch)
    if kind is None:
        return None

    return EditEvent(kind)


class InputHandler:
    """Handles keyboard input and applies it to the editor."""

    def __init__(self, editor: Editor, window_manager, confirm_quit: bool = True) -> None:
        self.editor = editor
        self.window_manager = window_manager
        self.confirm_quit = confirm_quit
        self._quit_warning_shown = False

    def handle_input(self, ch: int) -> bool:
        """Handle a single keyboard input. Returns False if should quit."""

        event = translate_key(ch)
        if event is None:
            return True

        if event.kind is EventKind.QUIT:
            return not self._quit()

        self._quit_warning_shown = False
        result = self.editor.apply(event)
        self._report(result)
        return True

    def _quit(self) -> bool:
        """Return True when the editor may exit now."""

        if self.confirm_quit and self.editor.modified and not self._quit_warning_shown:
            self._quit_warning_shown = True
            self.window_manager.set_status(UNSAVED_CHANGES_STATUS_MESSAGE)
            return False

        logger.info("Quitting editor")
        return True

    def _report(self, result: EditResult) -> None:
        if not result.ok:
            self.window_manager.set_status(f"Error: {result.message}")
            return

        if result.message:
            self.window_manager.set_status(result.message)
