"""Exception hierarchy for html_table.

Structural, resource and configuration errors abort a conversion.
CellFormatError is row-local: the parser catches it, skips the row and
records a RowWarning instead.
"""


class TableConverterError(Exception):
    """Base exception for all html_table errors."""


class FormatError(TableConverterError):
    """The markup does not have the shape the parser expects."""


class StructuralFormatError(FormatError):
    """The mandatory table start or table end marker is missing."""


class CellFormatError(FormatError):
    """A row contains an unterminated or unmatched cell marker.

    ``row_index`` is the 1-based position of the row among the rows that
    contain a cell marker; ``offset`` is the character offset of the bad
    marker inside the normalised table region.  The parser maps it back to
    the source markup when it builds the RowWarning.
    """

    def __init__(self, message: str, row_index: int = 0, offset: int = 0):
        super().__init__(message)
        self.message = message
        self.row_index = row_index
        self.offset = offset


class ResourceError(TableConverterError):
    """Input could not be read or output could not be written."""


class ConfigurationError(TableConverterError, ValueError):
    """Invalid separator, table class or environment configuration."""
