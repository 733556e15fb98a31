"""
UI package for the curses editor interface.

This package implements the user interface components: the WindowManager
drawing the highlighted buffer and status line, the Theme holding the color
pairs, and the InputHandler translating keys into editing events.
"""

from .input_handler import InputHandler, translate_key
from .theme import Theme
from .window import WindowManager

__all__ = ['WindowManager', 'InputHandler', 'Theme', 'translate_key']
