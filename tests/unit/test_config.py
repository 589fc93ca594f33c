"""Tests for rendering options."""

import pytest

from table_of_records import TableOptions


class TestTableOptions:
    """Tests for TableOptions."""

    def test_defaults(self) -> None:
        options = TableOptions()
        assert options.null_text == ""
        assert options.line_terminator == "\n"

    def test_crlf(self) -> None:
        assert TableOptions(line_terminator="\r\n").line_terminator == "\r\n"

    def test_invalid_line_terminator(self) -> None:
        with pytest.raises(ValueError, match="line_terminator"):
            TableOptions(line_terminator="\r")

    def test_null_text_with_newline(self) -> None:
        with pytest.raises(ValueError, match="line breaks"):
            TableOptions(null_text="a\nb")

    def test_null_text_must_be_string(self) -> None:
        with pytest.raises(ValueError, match="must be a string"):
            TableOptions(null_text=None)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        options = TableOptions()
        with pytest.raises(AttributeError):
            options.null_text = "x"  # type: ignore[misc]


class TestFromEnvironment:
    """Tests for TableOptions.from_environment."""

    def test_defaults(self) -> None:
        assert TableOptions.from_environment() == TableOptions()

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TABLE_OF_RECORDS_NULL_TEXT", "<null>")
        monkeypatch.setenv("TABLE_OF_RECORDS_LINE_TERMINATOR", "CRLF")

        options = TableOptions.from_environment()

        assert options.null_text == "<null>"
        assert options.line_terminator == "\r\n"

    def test_invalid_terminator(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TABLE_OF_RECORDS_LINE_TERMINATOR", "cr")
        with pytest.raises(ValueError, match="TABLE_OF_RECORDS_LINE_TERMINATOR"):
            TableOptions.from_environment()
