"""
table-of-records: Render collections of records as bordered text tables.

Columns are discovered from the record type at call time:
- One column per public scalar attribute, in declaration order
- Column width fits the header and every cell
- Text columns are left-aligned, numbers and other scalars right-aligned
- Every row is followed by its own border line

Example:
    import sys
    from dataclasses import dataclass

    from table_of_records import write_table

    @dataclass
    class Person:
        Id: int
        Name: str

    write_table([Person(1, "Ann"), Person(10, "Bo")], sys.stdout)

    # +----+------+
    # | Id | Name |
    # +----+------+
    # |  1 | Ann  |
    # +----+------+
    # | 10 | Bo   |
    # +----+------+
"""

from .config import TableOptions
from .exceptions import (
    EmptyCollectionError,
    InvalidArgumentError,
    MissingArgumentError,
    MixedRecordTypesError,
    NoColumnsError,
    TableOfRecordsError,
)
from .schema import (
    AttributeDescriptor,
    AttributeKind,
    TabularRecord,
    describe_record_type,
    stringify,
)
from .table import Column, Table, TableRenderer, format_table, write_table

__all__ = [
    # Rendering
    "write_table",
    "format_table",
    "TableRenderer",
    "TableOptions",
    "Table",
    "Column",
    # Discovery
    "AttributeDescriptor",
    "AttributeKind",
    "TabularRecord",
    "describe_record_type",
    "stringify",
    # Exceptions
    "TableOfRecordsError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "EmptyCollectionError",
    "NoColumnsError",
    "MixedRecordTypesError",
]
