"""Pydantic models for the in-memory table and conversion results.

A Table only lives for the duration of one conversion call: the generator
builds it from input lines and renders it, the parser recovers it from
markup and flattens it back to lines.  Rows are not required to have the
same number of cells.
"""

from collections.abc import Iterable

from pydantic import BaseModel, Field

from html_table.errors import CellFormatError


class Table(BaseModel):
    """Ordered rows of raw cell text."""

    rows: list[list[str]] = Field(default_factory=list)

    @classmethod
    def from_lines(cls, lines: Iterable[str], separator: str) -> "Table":
        """Split every line on each occurrence of *separator* (adjacent separators give empty cells)."""
        return cls(rows=[line.split(separator) for line in lines])

    def to_lines(self, separator: str) -> list[str]:
        """Join each row's cells with *separator*, one string per row."""
        return [separator.join(row) for row in self.rows]


class RowWarning(BaseModel):
    """A row the parser skipped because one of its cells was malformed."""

    row_index: int
    offset: int
    line: int
    message: str

    @classmethod
    def from_error(cls, error: CellFormatError, offset: int, line: int) -> "RowWarning":
        """Build a warning located at *offset* / *line* of the source markup."""
        return cls(row_index=error.row_index, offset=offset, line=line, message=error.message)

    def __str__(self) -> str:
        return f"Skipped row {self.row_index} (line {self.line}, offset {self.offset}): {self.message}"


class ConversionResult(BaseModel):
    """Output lines of a parse plus the warnings for every skipped row."""

    lines: list[str] = Field(default_factory=list)
    warnings: list[RowWarning] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when no row had to be skipped."""
        return not self.warnings

    def to_text(self) -> str:
        """Render the lines as file content, each terminated by a newline."""
        return "".join(f"{line}\n" for line in self.lines)
