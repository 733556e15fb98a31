"""
Core package for the line editor.

This package implements the editing engine: the LineStore holding the
document lines, the Cursor kept inside them, the C line scanner used for
highlighting, and the Editor that ties them to a file.
"""

from .buffer import LineStore
from .cursor import Cursor
from .editor import Editor
from .errors import CapacityExceeded, EditorError, EditResult, IoFailure, Outcome
from .events import EditEvent, EventKind
from .syntax import Category, CLineLexer, Span, highlight_line

__all__ = [
    'LineStore',
    'Cursor',
    'Editor',
    'EditorError',
    'CapacityExceeded',
    'IoFailure',
    'EditResult',
    'Outcome',
    'EditEvent',
    'EventKind',
    'Category',
    'CLineLexer',
    'Span',
    'highlight_line',
]
