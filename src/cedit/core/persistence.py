"""
Loading and saving buffers as newline-delimited text files.
"""

import logging
import os
import shutil
from typing import Iterable, List

from .errors import IoFailure

logger = logging.getLogger(__name__)

ENCODING = 'utf-8'


def load_lines(filename: str, max_lines: int, max_cols: int) -> List[str]:
    """
    Read a text file into a list of lines.

    A missing file yields a single empty line. Lines past ``max_lines`` are
    dropped, and a line longer than ``max_cols`` is cut into several lines.

    Args:
        filename: Path of the file to read
        max_lines: Maximum number of lines to keep
        max_cols: Maximum length of a line

    Returns:
        The lines without their terminators, never empty

    Raises:
        IoFailure: If the file exists but cannot be read
    """

    lines: List[str] = []
    truncated = False
    wrapped = 0

    try:
        with open(filename, 'r', encoding=ENCODING, errors='replace') as f:
            for raw_line in f:
                line = raw_line.rstrip('\n')

                chunks = [line[i:i + max_cols] for i in range(0, len(line), max_cols)] or ['']
                if len(chunks) > 1:
                    wrapped += 1

                room = max_lines - len(lines)
                if len(chunks) > room:
                    lines.extend(chunks[:room])
                    truncated = True
                    break

                lines.extend(chunks)

    except FileNotFoundError:
        logger.info("File %s does not exist, starting empty", filename)
        return ['']
    except OSError as e:
        logger.error("Failed to read %s: %s", filename, e)
        raise IoFailure(f"Failed to read {filename}: {e.strerror or e}", path=filename) from e

    if wrapped:
        logger.warning("Split %d over-long lines of %s at %d columns", wrapped, filename, max_cols)

    if truncated:
        logger.warning("Dropped lines of %s past the limit of %d", filename, max_lines)

    logger.info("Loaded %d lines from %s", len(lines), filename)
    return lines or ['']


def save_lines(filename: str, lines: Iterable[str]) -> int:
    """
    Write lines to a file, each followed by one newline. Returns the line count.

    The lines go to a temporary file next to ``filename`` which then replaces
    it, so a failed write leaves the old contents in place.
    """

    temp_name = f"{filename}.cedit-tmp"
    count = 0
    try:
        with open(temp_name, 'w', encoding=ENCODING, newline='\n') as f:
            for line in lines:
                f.write(line)
                f.write('\n')
                count += 1

        if os.path.exists(filename):
            shutil.copymode(filename, temp_name)
        os.replace(temp_name, filename)

    except OSError as e:
        logger.error("Failed to save %s: %s", filename, e)
        if os.path.exists(temp_name):
            os.remove(temp_name)
        raise IoFailure(f"Failed to save file: {e.strerror or e}", path=filename) from e

    logger.info("Saved %d lines to %s", count, filename)
    return count
