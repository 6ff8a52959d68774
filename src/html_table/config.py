"""Shared configuration for html_table conversions.

Defaults can be overridden from the environment (or a ``.env`` file at the
project root):

  HTML_TABLE_SEPARATOR -- field separator, exactly one character
  HTML_TABLE_CLASS     -- class attribute written on the generated <table>
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

from html_table.errors import ConfigurationError

logger = logging.getLogger(__name__)

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

ENCODING = "utf-8"

DEFAULT_SEPARATOR = " "
DEFAULT_TABLE_CLASS = "rustgen"

SEPARATOR_ENV = "HTML_TABLE_SEPARATOR"
TABLE_CLASS_ENV = "HTML_TABLE_CLASS"

# Characters that would close the quoted class attribute or the tag itself
TABLE_CLASS_FORBIDDEN = "'<>"


def check_separator(separator: str) -> str:
    """Return *separator* unchanged, or raise ConfigurationError if it is not a single character."""
    if not isinstance(separator, str) or len(separator) != 1:
        raise ConfigurationError(f"Separator must be exactly one character, got {separator!r}")
    return separator


def check_table_class(table_class: str) -> str:
    """Return *table_class* unchanged, or raise ConfigurationError if it would break the start tag."""
    if any(char in table_class for char in TABLE_CLASS_FORBIDDEN):
        raise ConfigurationError(f"Table class must not contain any of {TABLE_CLASS_FORBIDDEN!r}, got {table_class!r}")
    return table_class


class ConverterSettings(BaseModel):
    """Resolved options for one conversion."""

    separator: str = DEFAULT_SEPARATOR
    table_class: str = DEFAULT_TABLE_CLASS
    reverse: bool = False

    @field_validator("separator")
    @classmethod
    def separator_is_single_char(cls, value: str) -> str:
        return check_separator(value)

    @field_validator("table_class")
    @classmethod
    def table_class_is_attribute_safe(cls, value: str) -> str:
        return check_table_class(value)


def load_settings(separator: str | None = None, table_class: str | None = None, reverse: bool = False) -> ConverterSettings:
    """Merge explicit options with environment defaults.

    Explicit values win; ``None`` means "not given" and falls back to the
    environment, then to the built-in default.
    """
    if separator is None:
        separator = os.getenv(SEPARATOR_ENV, DEFAULT_SEPARATOR)
    if table_class is None:
        table_class = os.getenv(TABLE_CLASS_ENV, DEFAULT_TABLE_CLASS)
    try:
        settings = ConverterSettings(separator=separator, table_class=table_class, reverse=reverse)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc.errors()[0]['msg']}") from exc
    logger.debug("Resolved settings: %s", settings.model_dump())
    return settings
