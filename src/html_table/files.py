"""File reading and writing for conversions.

Every OS-level failure is re-raised as ResourceError naming the path, so the
CLI can report it without a traceback.
"""

import logging
from pathlib import Path

from html_table.config import ENCODING
from html_table.errors import ResourceError

logger = logging.getLogger(__name__)


def ensure_input_exists(filepath: Path) -> None:
    """Raise ResourceError if *filepath* is not an existing file."""
    if not Path(filepath).is_file():
        raise ResourceError(f"Input file {filepath} does not exist")


def read_text(filepath: Path) -> str:
    """Read the whole file as UTF-8 text."""
    try:
        with open(filepath, "r", encoding=ENCODING) as fopen:
            text = fopen.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceError(f"Failed to read input file {filepath}: {exc}") from exc
    logger.debug("Read %d characters from %s", len(text), filepath)
    return text


def read_lines(filepath: Path) -> list[str]:
    """Read the file as a list of lines without line terminators.

    A trailing newline does not produce an extra empty line.
    """
    lines = read_text(filepath).split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def write_text(filepath: Path, text: str) -> None:
    """Write *text* to *filepath*, replacing any existing content."""
    try:
        with open(filepath, "w", encoding=ENCODING) as fopen:
            fopen.write(text)
    except OSError as exc:
        raise ResourceError(f"Cannot write output file {filepath}: {exc}") from exc
    logger.debug("Wrote %d characters to %s", len(text), filepath)
