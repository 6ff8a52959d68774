"""Tag-tolerant extraction of rows and cells from HTML table markup.

No markup grammar is involved.  The parser works on character offsets over
an immutable string:

  1. locate the first ``<table ...>`` ... ``</table>`` region
  2. drop line breaks inside it
  3. split the region into row segments on ``</tr>``
  4. scan each segment for ``<td ...>text</td>`` cells, where *text* is the
     run of characters up to the next ``<``
  5. join the cells of each row with the separator

A missing table start or end aborts the whole parse (StructuralFormatError).
A malformed cell (unterminated, or a ``</td>`` with no matching start) only
costs its own row: the row is skipped and reported as a RowWarning, and the
remaining rows are still returned in order.  Warnings point back into the
original markup by character offset and 1-based line number.
"""

import logging
from collections.abc import Iterator

from html_table.config import DEFAULT_SEPARATOR, check_separator
from html_table.errors import CellFormatError, StructuralFormatError
from html_table.patterns import CELL_END, CELL_START, LINE_BREAKS, ROW_END, TABLE_END, TABLE_START, TAG_CLOSE, TAG_OPEN
from html_table.schema import ConversionResult, RowWarning, Table

logger = logging.getLogger(__name__)


# ─── Region Location ─────────────────────────────────────────────────────────


def find_table_span(markup: str) -> tuple[int, int]:
    """Return ``(start, end)`` offsets of the table region inside *markup*.

    *start* is just past the start tag's ``>``, *end* is where ``</table>``
    begins.
    """
    start = markup.find(TABLE_START)
    if start == -1:
        raise StructuralFormatError("no table found")
    end = markup.find(TABLE_END, start + len(TABLE_START))
    if end == -1:
        raise StructuralFormatError("unterminated table")
    # The start tag must be closed before the end marker
    tag_close = markup.find(TAG_CLOSE, start + len(TABLE_START), end)
    if tag_close == -1:
        raise StructuralFormatError("unterminated table")
    return tag_close + 1, end


def locate_table_region(markup: str) -> str:
    """Return the text between the first table start tag and the following ``</table>``.

    The start tag itself (including any attributes) is excluded.
    """
    start, end = find_table_span(markup)
    return markup[start:end]


def normalize(region: str) -> str:
    """Remove line breaks so that only markers determine row and cell boundaries."""
    for line_break in LINE_BREAKS:
        region = region.replace(line_break, "")
    return region


def kept_positions(region: str) -> list[int]:
    """Map each offset of ``normalize(region)`` to its offset in *region*."""
    return [i for i, char in enumerate(region) if char not in LINE_BREAKS]


# ─── Row / Cell Scanning ─────────────────────────────────────────────────────


def iter_row_segments(region: str) -> Iterator[tuple[int, str]]:
    """Yield ``(offset, segment)`` for each ``</tr>``-delimited piece of *region*.

    The text after the last ``</tr>`` is yielded too, so a final row missing
    its end marker is still considered.
    """
    cursor = 0
    while True:
        end = region.find(ROW_END, cursor)
        if end == -1:
            yield cursor, region[cursor:]
            return
        yield cursor, region[cursor:end]
        cursor = end + len(ROW_END)


def extract_cells(segment: str, row_index: int = 0, offset: int = 0) -> list[str]:
    """Return the text of every ``<td ...>text</td>`` cell in *segment*, in order.

    Raises CellFormatError on a cell start tag that is never closed, on cell
    text that is not followed by ``</td>``, and on a ``</td>`` outside any
    cell.  *row_index* and *offset* only feed the error; offsets reported are
    relative to the start of *segment* plus *offset*.
    """
    cells: list[str] = []
    cursor = 0
    while True:
        start = segment.find(CELL_START, cursor)
        # Text between cells (or after the last one) must not close a cell
        gap_end = len(segment) if start == -1 else start
        stray = segment.find(CELL_END, cursor, gap_end)
        if stray != -1:
            raise CellFormatError(f"unmatched {CELL_END}", row_index, offset + stray)
        if start == -1:
            return cells

        open_end = segment.find(TAG_CLOSE, start + len(CELL_START))
        if open_end == -1:
            raise CellFormatError("cell start tag is not closed", row_index, offset + start)
        text_start = open_end + 1
        text_end = segment.find(TAG_OPEN, text_start)
        if text_end == -1 or not segment.startswith(CELL_END, text_end):
            raise CellFormatError(f"cell is not terminated by {CELL_END}", row_index, offset + start)
        cells.append(segment[text_start:text_end])
        cursor = text_end + len(CELL_END)


# ─── Parser ──────────────────────────────────────────────────────────────────


class TableParser:
    """Markup -> records."""

    def __init__(self, separator: str = DEFAULT_SEPARATOR):
        self.separator = check_separator(separator)

    def parse_table(self, markup: str) -> tuple[Table, list[RowWarning]]:
        """Recover the rows of the first table in *markup*, plus warnings for skipped rows."""
        region_start, region_end = find_table_span(markup)
        raw_region = markup[region_start:region_end]
        region = normalize(raw_region)
        positions = kept_positions(raw_region)

        table = Table()
        warnings: list[RowWarning] = []
        row_index = 0
        for offset, segment in iter_row_segments(region):
            # Whitespace or stray text between rows
            if CELL_START not in segment and CELL_END not in segment:
                continue
            row_index += 1
            try:
                cells = extract_cells(segment, row_index, offset)
            except CellFormatError as exc:
                source_offset = region_start + positions[exc.offset]
                line = markup.count("\n", 0, source_offset) + 1
                warning = RowWarning.from_error(exc, source_offset, line)
                logger.debug("%s", warning)
                warnings.append(warning)
                continue
            if cells:
                table.rows.append(cells)

        logger.debug("Recovered %d rows (%d skipped)", len(table.rows), len(warnings))
        return table, warnings

    def parse(self, markup: str) -> ConversionResult:
        """Recover the first table in *markup* as separator-joined lines."""
        table, warnings = self.parse_table(markup)
        lines = table.to_lines(self.separator)
        for line in lines:
            logger.debug("%s", line)
        return ConversionResult(lines=lines, warnings=warnings)


def parse(markup: str, separator: str = DEFAULT_SEPARATOR) -> ConversionResult:
    """Convenience wrapper: ``TableParser(separator).parse(markup)``."""
    return TableParser(separator).parse(markup)
