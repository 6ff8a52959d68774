"""Render delimited text lines as an HTML table.

Each input line becomes one ``<tr>`` and each separator-delimited field one
``<td>``.  Field text is written verbatim: no escaping is applied, so a field
containing ``<`` or the separator will not survive a round trip through the
parser.

Layout of the generated document:

    <table class='rustgen'>
    <tr>
    <td>a</td><td>b</td>
    </tr>
    </table>
"""

import logging
from collections.abc import Iterable

from html_table.config import DEFAULT_SEPARATOR, DEFAULT_TABLE_CLASS, check_separator, check_table_class
from html_table.patterns import CELL_END, CELL_OPEN, ROW_END, ROW_START, TABLE_END
from html_table.schema import Table

logger = logging.getLogger(__name__)


class TableGenerator:
    """Records -> markup."""

    def __init__(self, separator: str = DEFAULT_SEPARATOR, table_class: str = DEFAULT_TABLE_CLASS):
        self.separator = check_separator(separator)
        self.table_class = check_table_class(table_class)

    def start_tag(self) -> str:
        """Opening table tag, with the class attribute when one is configured."""
        if self.table_class:
            return f"<table class='{self.table_class}'>"
        return "<table>"

    def generate(self, lines: Iterable[str]) -> str:
        """Split *lines* on the separator and render them as a table."""
        return self.generate_table(Table.from_lines(lines, self.separator))

    def generate_table(self, table: Table) -> str:
        """Render an already-split Table."""
        parts = [self.start_tag(), "\n"]
        for row in table.rows:
            parts.append(f"{ROW_START}\n")
            parts.extend(f"{CELL_OPEN}{cell}{CELL_END}" for cell in row)
            parts.append(f"\n{ROW_END}\n")
        parts.append(f"{TABLE_END}\n")
        logger.debug("Generated table with %d rows", len(table.rows))
        return "".join(parts)


def generate(lines: Iterable[str], separator: str = DEFAULT_SEPARATOR) -> str:
    """Convenience wrapper: ``TableGenerator(separator).generate(lines)``."""
    return TableGenerator(separator).generate(lines)
