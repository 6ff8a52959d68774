"""Shared test configuration and fixtures."""

import pytest

from html_table.config import SEPARATOR_ENV, TABLE_CLASS_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's .env / shell overrides out of the tests."""
    monkeypatch.delenv(SEPARATOR_ENV, raising=False)
    monkeypatch.delenv(TABLE_CLASS_ENV, raising=False)


@pytest.fixture
def two_by_three_markup() -> str:
    """Two rows of three cells each, no whitespace between tags."""
    return "<table><tr><td>a</td><td>b</td><td>c</td></tr><tr><td>d</td><td>e</td><td>f</td></tr></table>"
