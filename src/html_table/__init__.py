"""Delimited text <-> HTML table conversion.

Submodules:
  patterns   -- fixed markup vocabulary (table/row/cell markers)
  errors     -- exception hierarchy (format, resource, configuration)
  schema     -- Table, RowWarning, ConversionResult Pydantic models
  config     -- defaults, .env overrides, ConverterSettings
  generator  -- TableGenerator: records -> markup
  parser     -- TableParser: tag-tolerant markup -> records
  files      -- file reading/writing for the CLI
  pipeline   -- file-to-file run() entry point
  cli        -- argparse command line (html-table)
"""

__version__ = "0.1.0"

from html_table.errors import (
    CellFormatError,
    ConfigurationError,
    FormatError,
    ResourceError,
    StructuralFormatError,
    TableConverterError,
)
from html_table.generator import TableGenerator, generate
from html_table.parser import TableParser, parse
from html_table.schema import ConversionResult, RowWarning, Table

__all__ = [
    "CellFormatError",
    "ConfigurationError",
    "ConversionResult",
    "FormatError",
    "ResourceError",
    "RowWarning",
    "StructuralFormatError",
    "Table",
    "TableConverterError",
    "TableGenerator",
    "TableParser",
    "generate",
    "parse",
]
