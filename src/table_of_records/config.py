"""Rendering options for table-of-records."""

from __future__ import annotations

import os
from dataclasses import dataclass

# Accepted values for TABLE_OF_RECORDS_LINE_TERMINATOR
LINE_TERMINATORS = {"lf": "\n", "crlf": "\r\n"}


@dataclass(frozen=True)
class TableOptions:
    """
    Options that control how cell values and lines are written.

    Attributes:
        null_text: Text written for absent (None) values
        line_terminator: Appended to every line written to the sink
    """

    null_text: str = ""
    line_terminator: str = "\n"

    def __post_init__(self) -> None:
        if not isinstance(self.null_text, str):
            raise ValueError("null_text must be a string")
        if "\n" in self.null_text or "\r" in self.null_text:
            raise ValueError("null_text must not contain line breaks")
        if self.line_terminator not in LINE_TERMINATORS.values():
            raise ValueError("line_terminator must be '\\n' or '\\r\\n'")

    @classmethod
    def from_environment(cls) -> TableOptions:
        """Create TableOptions from environment variables."""
        terminator = os.environ.get("TABLE_OF_RECORDS_LINE_TERMINATOR", "lf").lower()
        if terminator not in LINE_TERMINATORS:
            raise ValueError(
                f"TABLE_OF_RECORDS_LINE_TERMINATOR must be one of "
                f"{', '.join(sorted(LINE_TERMINATORS))}, got {terminator!r}"
            )
        return cls(
            null_text=os.environ.get("TABLE_OF_RECORDS_NULL_TEXT", ""),
            line_terminator=LINE_TERMINATORS[terminator],
        )
