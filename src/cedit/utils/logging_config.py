"""
Logging setup for the editor.

Curses owns the terminal while the editor runs, so log records only ever go
to a file.
"""

import logging
from typing import Final, Optional

# "cedit" when installed, "src.cedit" when run through edit.py from a checkout.
LOGGER_NAME: Final[str] = __name__.rsplit('.', 2)[0]
LOG_FORMAT: Final[str] = "%(asctime)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)"

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(filename: Optional[str] = None, level: str = 'WARNING') -> logging.Logger:
    """
    Configure the package logger.

    Args:
        filename: Log file path. Without one, records are discarded.
        level: Name of the minimum level to record

    Returns:
        The configured package logger
    """

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level '{level}'")

    logger.setLevel(numeric_level)

    if not filename:
        logger.addHandler(logging.NullHandler())
        return logger

    handler = logging.FileHandler(filename, encoding='utf-8')
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger
