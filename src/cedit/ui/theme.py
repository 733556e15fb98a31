"""
Curses color setup for highlight categories.
"""

import curses
import logging
from typing import Any, Dict, Final, Mapping

from pygments.token import Token

from ..core.syntax import Category, CATEGORY_TOKENS

logger = logging.getLogger(__name__)

SYNTAX_COLORS: Final[Dict[str, int]] = {
    'keyword': 1,
    'string': 2,
    'char': 3,
    'comment': 4,
    'number': 5,
    'preprocessor': 6,
    'default': 0,
}

STATUS_PAIR: Final[int] = 7
ERROR_PAIR: Final[int] = 8
LINE_NUMBER_PAIR: Final[int] = 9

COLOR_NAMES: Final[Dict[str, int]] = {
    'black': curses.COLOR_BLACK,
    'red': curses.COLOR_RED,
    'green': curses.COLOR_GREEN,
    'yellow': curses.COLOR_YELLOW,
    'blue': curses.COLOR_BLUE,
    'magenta': curses.COLOR_MAGENTA,
    'cyan': curses.COLOR_CYAN,
    'white': curses.COLOR_WHITE,
    'default': -1,
}

TOKEN_COLOR_MAP: Final[Dict[Any, int]] = {
    Token.Keyword: SYNTAX_COLORS['keyword'],
    Token.Literal.String: SYNTAX_COLORS['string'],
    Token.Literal.String.Char: SYNTAX_COLORS['char'],
    Token.Comment: SYNTAX_COLORS['comment'],
    Token.Comment.Preproc: SYNTAX_COLORS['preprocessor'],
    Token.Literal.Number: SYNTAX_COLORS['number'],
    Token.Text: SYNTAX_COLORS['default'],
}


def color_number(name: str) -> int:
    """Translate a configured color name to a curses color number."""

    try:
        return COLOR_NAMES[name.lower()]
    except KeyError:
        logger.warning("Unknown color '%s', using terminal default", name)
        return -1


def token_pair(token_type: Any) -> int:
    """
    Get the color pair for a Pygments token type.

    Args:
        token_type: The Pygments token type

    Returns:
        The color pair number, walking up to parent types when needed
    """

    while token_type is not None:
        if token_type in TOKEN_COLOR_MAP:
            return TOKEN_COLOR_MAP[token_type]
        token_type = token_type.parent

    return SYNTAX_COLORS['default']


class Theme:
    """Initializes color pairs and resolves curses attributes for categories."""

    def __init__(self, colors: Mapping[str, str]) -> None:
        self.colors = dict(colors)
        self.color_pairs_initialized = False

    def init_colors(self) -> None:
        """Initialize color pairs for syntax highlighting and chrome."""

        if self.color_pairs_initialized:
            return

        curses.start_color()
        curses.use_default_colors()

        for name, pair in SYNTAX_COLORS.items():
            if pair == 0:
                continue
            curses.init_pair(pair, color_number(self.colors.get(name, 'default')), -1)

        curses.init_pair(STATUS_PAIR, curses.COLOR_WHITE, -1)
        curses.init_pair(ERROR_PAIR, curses.COLOR_RED, -1)
        curses.init_pair(LINE_NUMBER_PAIR, curses.COLOR_YELLOW, -1)

        self.color_pairs_initialized = True

    def attr(self, category: Category) -> int:
        if not self.color_pairs_initialized:
            return curses.A_NORMAL

        return curses.color_pair(token_pair(CATEGORY_TOKENS[category]))
