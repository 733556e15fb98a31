"""Terminal line editor with C syntax highlighting."""

__all__ = [
    "config",
    "core",
    "ui",
    "utils",
]

__version__ = "0.1.0"
