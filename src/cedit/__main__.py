"""
Command line entry point for cedit.
"""

import argparse
import curses
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from pygments.formatters import TerminalFormatter

from . import __version__
from .config import EditorConfig, load_config
from .core.editor import Editor
from .core.syntax import format_text
from .ui.input_handler import InputHandler
from .ui.window import WindowManager
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog="cedit",
        description="cedit - Terminal line editor with C syntax highlighting"
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=str,
        help="File to open"
    )
    parser.add_argument("--config", type=str, help="Path to a TOML configuration file")
    parser.add_argument("--max-lines", type=int, help="Maximum number of lines in the buffer")
    parser.add_argument("--max-cols", type=int, help="Maximum length of a line")
    parser.add_argument(
        "--line-numbers",
        action="store_true",
        default=None,
        help="Show line numbers"
    )
    parser.add_argument("--log-file", type=str, help="Write debug information to this file")
    parser.add_argument("--log-level", type=str, help="Minimum log level (DEBUG, INFO, WARNING, ERROR)")
    parser.add_argument(
        "--cat",
        action="store_true",
        help="Print the file with syntax colors and exit"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> EditorConfig:
    """Load the configuration file and apply command line overrides."""

    overrides = {
        'max_lines': args.max_lines,
        'max_cols': args.max_cols,
        'show_line_numbers': args.line_numbers,
        'log_file': args.log_file,
        'log_level': args.log_level.upper() if args.log_level else None,
    }

    config = load_config(args.config)
    return replace(config, **{key: value for key, value in overrides.items() if value is not None})


def cat_file(editor: Editor) -> str:
    """Return the buffer rendered with ANSI colors."""

    text = "\n".join(editor.lines) + "\n"
    return format_text(text, TerminalFormatter())


def main_with_args(stdscr: 'curses.window', editor: Editor, config: EditorConfig, load_error: str = "") -> None:
    """Run the interactive editor until the user quits."""

    curses.raw()
    curses.noecho()
    curses.curs_set(0)
    stdscr.keypad(True)
    stdscr.timeout(100)

    window_manager = WindowManager(stdscr, editor, config)
    input_handler = InputHandler(editor, window_manager, confirm_quit=config.confirm_quit)

    if load_error:
        window_manager.set_status(f"Error: {load_error}")

    while True:
        current_height, current_width = stdscr.getmaxyx()
        if (current_height, current_width) != (window_manager.height, window_manager.width):
            window_manager.resize()

        window_manager.refresh_all()

        try:
            ch = stdscr.getch()
        except curses.error:
            continue

        if ch == -1 or ch == curses.KEY_RESIZE:
            continue

        if not input_handler.handle_input(ch):
            break


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)

    try:
        config = build_config(args)
        setup_logging(config.log_file, config.log_level)
    except (ValueError, OSError) as e:
        print(f"cedit: {e}", file=sys.stderr)
        return 2

    editor = Editor(
        max_lines=config.max_lines,
        max_cols=config.max_cols,
        default_filename=config.default_filename,
    )

    load_error = ""
    if args.file:
        result = editor.load(args.file)
        if not result.ok:
            if args.cat:
                print(f"cedit: {result.message}", file=sys.stderr)
                return 1
            load_error = result.message

    if args.cat:
        sys.stdout.write(cat_file(editor))
        return 0

    logger.info("Starting editor on %s", editor.display_name)
    curses.wrapper(main_with_args, editor, config, load_error)
    return 0


if __name__ == "__main__":
    sys.exit(main())
