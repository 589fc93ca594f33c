"""Pytest fixtures for table-of-records tests."""

import io

import pytest

from tests.fixtures.records import Person


@pytest.fixture
def people() -> list[Person]:
    """The two-record collection used in most layout tests."""
    return [Person(1, "Ann"), Person(10, "Bo")]


@pytest.fixture
def sink() -> io.StringIO:
    """In-memory text sink."""
    return io.StringIO()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep option environment variables from leaking into tests."""
    monkeypatch.delenv("TABLE_OF_RECORDS_NULL_TEXT", raising=False)
    monkeypatch.delenv("TABLE_OF_RECORDS_LINE_TERMINATOR", raising=False)
