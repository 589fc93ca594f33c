"""
Bordered text table renderer for collections of records.

This module provides a TableRenderer class that discovers the public scalar
attributes of a record type and writes the records as a fully ruled table.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Collection, Iterator
from dataclasses import dataclass, field
from typing import Any, Protocol

from .config import TableOptions
from .exceptions import (
    EmptyCollectionError,
    InvalidArgumentError,
    MissingArgumentError,
    MixedRecordTypesError,
    NoColumnsError,
)
from .schema import AttributeDescriptor, describe_record_type

logger = logging.getLogger(__name__)


class TextSink(Protocol):
    """Anything text can be written to, e.g. an open file or sys.stdout."""

    def write(self, text: str, /) -> Any: ...


@dataclass
class Column:
    """Rendering state for one attribute: header, width and alignment."""

    descriptor: AttributeDescriptor
    width: int = 0

    def __post_init__(self) -> None:
        self.width = max(self.width, len(self.header))

    @property
    def header(self) -> str:
        return self.descriptor.name

    @property
    def alignment(self) -> str:
        return self.descriptor.alignment

    def pad(self, text: str) -> str:
        """Pad cell text to the column width according to the alignment."""
        if self.alignment == "r":
            return text.rjust(self.width)
        return text.ljust(self.width)


@dataclass
class Table:
    """Columns plus the formatted (unpadded) cell text of every row."""

    columns: list[Column]
    rows: list[list[str]] = field(default_factory=list)

    @property
    def border(self) -> str:
        return "+-" + "-+-".join("-" * c.width for c in self.columns) + "-+"

    @property
    def header(self) -> str:
        return "| " + " | ".join(c.header.ljust(c.width) for c in self.columns) + " |"

    def format_row(self, cells: list[str]) -> str:
        padded = [column.pad(cell) for column, cell in zip(self.columns, cells)]
        return "| " + " | ".join(padded) + " |"

    def lines(self) -> Iterator[str]:
        """Yield border, header, border, then a row and a border per record."""
        border = self.border
        yield border
        yield self.header
        yield border
        for cells in self.rows:
            yield self.format_row(cells)
            yield border


class TableRenderer:
    """Render a collection of records as a bordered text table.

    Example output:
        +----+------+
        | Id | Name |
        +----+------+
        |  1 | Ann  |
        +----+------+
        | 10 | Bo   |
        +----+------+
    """

    def __init__(self, options: TableOptions | None = None) -> None:
        """Initialize the table renderer.

        Args:
            options: Null-value text and line terminator.
                     Defaults to TableOptions().
        """
        self._options = options if options is not None else TableOptions()

    @property
    def options(self) -> TableOptions:
        return self._options

    def write(self, collection: Collection[Any] | None, sink: TextSink | None) -> None:
        """Write the records in ``collection`` to ``sink`` as a table.

        Nothing is written unless every argument check passes and every
        cell has been formatted. Exceptions raised by ``sink.write``
        propagate unchanged; lines already written stay in the sink.

        Args:
            collection: Non-empty collection of records of one type
            sink: Text destination exposing ``write(str)``

        Raises:
            MissingArgumentError: If collection or sink is None
            InvalidArgumentError: If collection is not a sized collection
                or sink has no write method
            EmptyCollectionError: If collection has no records
            NoColumnsError: If the record type has no public scalar attributes
            MixedRecordTypesError: If a record is not of the first record's type
        """
        if collection is None:
            raise MissingArgumentError("collection")
        if sink is None:
            raise MissingArgumentError("sink")
        if not isinstance(collection, Collection):
            raise InvalidArgumentError(
                "collection",
                f"collection must be a sized, re-iterable collection, "
                f"got {type(collection).__qualname__}",
            )
        if not callable(getattr(sink, "write", None)):
            raise InvalidArgumentError(
                "sink", f"sink must have a write() method, got {type(sink).__qualname__}"
            )
        if len(collection) < 1:
            raise EmptyCollectionError("collection")

        table = self.build(collection)

        terminator = self._options.line_terminator
        for line in table.lines():
            sink.write(line + terminator)

        logger.debug(
            "Wrote table with %d column(s) and %d row(s)",
            len(table.columns),
            len(table.rows),
        )

    def render(self, collection: Collection[Any] | None) -> str:
        """Render the records in ``collection`` and return the table text.

        Same checks and output as write(), collected into a string.
        """
        buffer = io.StringIO()
        self.write(collection, buffer)
        return buffer.getvalue()

    def build(self, collection: Collection[Any]) -> Table:
        """Discover columns and format every cell, widening columns as needed.

        Args:
            collection: Non-empty collection of records of one type

        Returns:
            Table whose column widths are final
        """
        first = next(iter(collection))
        record_type = type(first)

        descriptors = describe_record_type(record_type, sample=first)
        if not descriptors:
            raise NoColumnsError(record_type)

        table = Table(columns=[Column(d) for d in descriptors])
        null_text = self._options.null_text

        for index, record in enumerate(collection):
            if not isinstance(record, record_type):
                raise MixedRecordTypesError(record_type, type(record), index)
            cells = [d.format(record, null_text) for d in descriptors]
            for column, cell in zip(table.columns, cells):
                column.width = max(column.width, len(cell))
            table.rows.append(cells)

        return table


def write_table(
    collection: Collection[Any] | None,
    sink: TextSink | None,
    options: TableOptions | None = None,
) -> None:
    """
    Write a collection of records to a text sink as a bordered table.

    Args:
        collection: Non-empty collection of records of one type
        sink: Text destination exposing ``write(str)``
        options: Null-value text and line terminator

    Raises:
        MissingArgumentError: If collection or sink is None
        EmptyCollectionError: If collection has no records

    Example:
        >>> import sys
        >>> from dataclasses import dataclass
        >>> @dataclass
        ... class Person:
        ...     Id: int
        ...     Name: str
        >>> write_table([Person(1, "Ann"), Person(10, "Bo")], sys.stdout)
        +----+------+
        | Id | Name |
        +----+------+
        |  1 | Ann  |
        +----+------+
        | 10 | Bo   |
        +----+------+
    """
    TableRenderer(options).write(collection, sink)


def format_table(
    collection: Collection[Any] | None,
    options: TableOptions | None = None,
) -> str:
    """Render a collection of records as a bordered table and return the text."""
    return TableRenderer(options).render(collection)
