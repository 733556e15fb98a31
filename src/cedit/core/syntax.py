"""
Syntax highlighting module for C source lines, usable standalone or through Pygments.

Lines are scanned one at a time. The only state carried from one line to the
next is whether an unterminated ``/* ... */`` comment is still open, so any
line can be colored by replaying the lines above it.
"""

import string
from dataclasses import dataclass
from enum import Enum
from itertools import islice
from typing import Any, Dict, Final, FrozenSet, Iterable, Iterator, List, Optional, Tuple

from pygments import highlight
from pygments.formatter import Formatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_for_filename
from pygments.token import Token
from pygments.util import ClassNotFound

C_KEYWORDS: Final[FrozenSet[str]] = frozenset({
    'auto', 'break', 'case', 'char', 'const', 'continue', 'default', 'do',
    'double', 'else', 'enum', 'extern', 'float', 'for', 'goto', 'if',
    'int', 'long', 'register', 'return', 'short', 'signed', 'sizeof', 'static',
    'struct', 'switch', 'typedef', 'union', 'unsigned', 'void', 'volatile', 'while',
})

DIGITS: Final[FrozenSet[str]] = frozenset('0123456789')
NUMBER_CHARS: Final[FrozenSet[str]] = DIGITS | frozenset('.fl')
IDENT_START: Final[FrozenSet[str]] = frozenset(string.ascii_letters + '_')
IDENT_CHARS: Final[FrozenSet[str]] = IDENT_START | DIGITS


class Category(Enum):
    """Highlight category of a span."""

    KEYWORD = 'keyword'
    STRING = 'string'
    CHAR_LITERAL = 'char'
    COMMENT = 'comment'
    PREPROCESSOR = 'preprocessor'
    NUMBER = 'number'
    PLAIN = 'plain'


CATEGORY_TOKENS: Final[Dict[Category, Any]] = {
    Category.KEYWORD: Token.Keyword,
    Category.STRING: Token.Literal.String,
    Category.CHAR_LITERAL: Token.Literal.String.Char,
    Category.COMMENT: Token.Comment,
    Category.PREPROCESSOR: Token.Comment.Preproc,
    Category.NUMBER: Token.Literal.Number,
    Category.PLAIN: Token.Text,
}

QUOTE_CATEGORIES: Final[Dict[str, Category]] = {
    '"': Category.STRING,
    "'": Category.CHAR_LITERAL,
}


@dataclass(frozen=True)
class Span:
    """Half-open character range ``[start, end)`` of one line with its category."""

    start: int
    end: int
    category: Category

    @property
    def token_type(self) -> Any:
        return CATEGORY_TOKENS[self.category]

    def text(self, line: str) -> str:
        return line[self.start:self.end]


def highlight_line(line: str, in_comment: bool = False) -> Tuple[List[Span], bool]:
    """
    Split a line into highlighted spans.

    Args:
        line: The line to scan, without its terminator
        in_comment: Whether a block comment is open when the line starts

    Returns:
        The spans covering the whole line, and whether a block comment is
        still open at its end
    """

    spans: List[Span] = []
    length = len(line)
    i = 0

    if in_comment:
        i, in_comment = _scan_comment_body(line, 0)
        if i > 0:
            spans.append(Span(0, i, Category.COMMENT))

    while i < length:
        ch = line[i]
        nxt = line[i + 1] if i + 1 < length else ''
        start = i

        if ch == '/' and nxt == '/':
            spans.append(Span(start, length, Category.COMMENT))
            break

        if ch == '/' and nxt == '*':
            i, in_comment = _scan_comment_body(line, i + 2)
            spans.append(Span(start, i, Category.COMMENT))
            continue

        if ch in QUOTE_CATEGORIES:
            i = _scan_quoted(line, i)
            spans.append(Span(start, i, QUOTE_CATEGORIES[ch]))
            continue

        if ch == '#' and not line[:i].strip():
            i += 1
            while i < length and not line[i].isspace():
                i += 1
            spans.append(Span(start, i, Category.PREPROCESSOR))
            continue

        if ch in DIGITS or (ch == '.' and nxt in DIGITS):
            while i < length and line[i] in NUMBER_CHARS:
                i += 1
            spans.append(Span(start, i, Category.NUMBER))
            continue

        if ch in IDENT_START:
            while i < length and line[i] in IDENT_CHARS:
                i += 1
            word = line[start:i]
            category = Category.KEYWORD if word in C_KEYWORDS else Category.PLAIN
            spans.append(Span(start, i, category))
            continue

        spans.append(Span(start, i + 1, Category.PLAIN))
        i += 1

    return spans, in_comment


def _scan_comment_body(line: str, pos: int) -> Tuple[int, bool]:
    """Return the end of a block comment body starting at ``pos`` and whether it stays open."""

    end = line.find('*/', pos)
    if end < 0:
        return len(line), True

    return end + 2, False


def _scan_quoted(line: str, pos: int) -> int:
    quote = line[pos]
    length = len(line)
    i = pos + 1

    while i < length and line[i] != quote:
        if line[i] == '\\' and i + 1 < length:
            i += 2
            continue
        i += 1

    if i < length:
        i += 1

    return i


def comment_state_before(lines: Iterable[str], row: int) -> bool:
    """Replay the lines above ``row`` and return the comment state entering it."""

    in_comment = False
    for line in islice(lines, row):
        _, in_comment = highlight_line(line, in_comment)

    return in_comment


def highlight_lines(lines: Iterable[str], start: int, stop: int) -> Iterator[Tuple[int, List[Span]]]:
    """
    Yield ``(row, spans)`` for rows ``start`` up to ``stop``.

    The comment state is rebuilt from the first line on every call, so the
    result only depends on the current content.
    """

    in_comment = False
    for row, line in enumerate(islice(lines, stop)):
        spans, next_state = highlight_line(line, in_comment)
        if row >= start:
            yield row, spans
        in_comment = next_state


class CLineLexer(Lexer):
    """Pygments lexer backed by the line scanner of this module."""

    name = 'C (line scanner)'
    aliases = ['c-line']
    filenames: List[str] = []
    mimetypes: List[str] = []

    def get_tokens_unprocessed(self, text: str) -> Iterator[Tuple[int, Any, str]]:
        in_comment = False
        offset = 0
        lines = text.split('\n')

        for index, line in enumerate(lines):
            spans, in_comment = highlight_line(line, in_comment)
            for span in spans:
                yield offset + span.start, span.token_type, span.text(line)

            offset += len(line)
            if index < len(lines) - 1:
                yield offset, Token.Text, '\n'
                offset += 1


def format_text(text: str, formatter: Formatter) -> str:
    """Render C source with a Pygments formatter."""

    return highlight(text, CLineLexer(stripnl=False), formatter)


def detect_language(filename: Optional[str]) -> Optional[str]:
    """
    Detect the language of a file from its name.

    Args:
        filename: The name of the file

    Returns:
        The Pygments language name or None if not detected
    """

    if not filename:
        return None

    try:
        return get_lexer_for_filename(filename).name
    except ClassNotFound:
        return None
