"""File-to-file conversion entry point.

Reads the input, runs the generator or the parser depending on
``settings.reverse``, and writes the output.  The output file is only
written after the conversion succeeded, so a StructuralFormatError leaves no
partial file behind.
"""

import logging
from pathlib import Path

from html_table.config import ConverterSettings
from html_table.files import ensure_input_exists, read_lines, read_text, write_text
from html_table.generator import TableGenerator
from html_table.parser import TableParser
from html_table.schema import RowWarning

logger = logging.getLogger(__name__)


def run(input_path: Path, output_path: Path, settings: ConverterSettings) -> list[RowWarning]:
    """Convert *input_path* into *output_path* and return the warnings for skipped rows."""
    ensure_input_exists(input_path)

    if settings.reverse:
        # ── HTML table -> delimited lines ────────────────────────────────
        result = TableParser(settings.separator).parse(read_text(input_path))
        write_text(output_path, result.to_text())
        logger.info("Wrote %d lines to %s (%d rows skipped)", len(result.lines), output_path, len(result.warnings))
        return result.warnings

    # ── Delimited lines -> HTML table ────────────────────────────────────
    lines = read_lines(input_path)
    markup = TableGenerator(settings.separator, settings.table_class).generate(lines)
    write_text(output_path, markup)
    logger.info("Wrote table with %d rows to %s", len(lines), output_path)
    return []
