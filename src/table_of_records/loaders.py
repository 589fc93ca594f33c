"""
Load records from JSON or YAML documents.

Parsed documents are lists of mappings. They are turned into instances of a
generated dataclass so the renderer sees one typed record type: columns follow
the order in which keys first appear, and each column is typed from the
values it holds.
"""

from __future__ import annotations

import json
import keyword
import logging
from collections.abc import Mapping, Sequence
from dataclasses import make_dataclass
from pathlib import Path
from typing import IO, Any

import yaml

from .exceptions import EmptyCollectionError, InvalidArgumentError
from .schema import classify_value

logger = logging.getLogger(__name__)

FORMATS = ("json", "yaml")


def detect_format(path: str | Path) -> str:
    """Pick 'yaml' for .yaml/.yml files and 'json' for everything else."""
    if Path(path).suffix.lower() in (".yaml", ".yml"):
        return "yaml"
    return "json"


def parse_document(stream: IO[str], fmt: str) -> Any:
    """
    Parse a JSON or YAML document.

    Raises:
        ValueError: If ``fmt`` is not a supported format
        json.JSONDecodeError, yaml.YAMLError: If the document is malformed
    """
    if fmt == "json":
        return json.load(stream)
    if fmt == "yaml":
        return yaml.safe_load(stream)
    raise ValueError(f"Unknown format: {fmt}")


def load_records(stream: IO[str], fmt: str, type_name: str = "Record") -> list[Any]:
    """
    Parse a document and convert its rows to records.

    The document must be a list of mappings, or a mapping holding exactly
    one such list (e.g. ``{"people": [...]}``).

    Args:
        stream: Open text stream with the document
        fmt: "json" or "yaml"
        type_name: Name of the generated record type

    Returns:
        Records of a single generated dataclass type
    """
    data = parse_document(stream, fmt)
    if isinstance(data, Mapping) and len(data) == 1:
        (data,) = data.values()
    return records_from_mappings(data, type_name=type_name)


def records_from_mappings(rows: Any, type_name: str = "Record") -> list[Any]:
    """
    Convert a list of mappings to instances of one generated dataclass.

    Args:
        rows: Non-empty sequence of mappings with string keys
        type_name: Name of the generated record type

    Returns:
        One record per mapping, in input order

    Raises:
        InvalidArgumentError: If rows is not a sequence of mappings
        EmptyCollectionError: If rows is empty
    """
    if not isinstance(rows, Sequence) or isinstance(rows, (str, bytes)):
        raise InvalidArgumentError(
            "rows", f"Expected a list of records, got {type(rows).__name__}"
        )
    if not rows:
        raise EmptyCollectionError("rows")
    for index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            raise InvalidArgumentError(
                "rows", f"Row {index} is {type(row).__name__}, expected a mapping"
            )

    keys: dict[str, None] = {}
    for row in rows:
        for key in row:
            if not isinstance(key, str) or not key.isidentifier() or keyword.iskeyword(key):
                raise InvalidArgumentError(
                    "rows", f"Key {key!r} is not a valid attribute name"
                )
            keys.setdefault(key, None)

    fields = []
    converters = {}
    for key in keys:
        annotation, converter = _column_type([row.get(key) for row in rows])
        fields.append((key, annotation | None, None))
        if converter is not None:
            converters[key] = converter

    record_type = make_dataclass(type_name, fields)
    logger.debug(
        "Built %s with %d field(s) from %d row(s)", type_name, len(fields), len(rows)
    )

    records = []
    for row in rows:
        values = {}
        for key in keys:
            value = row.get(key)
            if value is not None and key in converters:
                value = converters[key](value)
            values[key] = value
        records.append(record_type(**values))
    return records


def _column_type(values: list[Any]) -> tuple[type, Any]:
    """Choose the annotation for a column and an optional value converter."""
    present = [v for v in values if v is not None]
    if not present:
        return str, None
    if any(classify_value(v) is None for v in present):
        # Nested data; annotated as a non-scalar so it gets no column
        return object, None

    types = {type(v) for v in present}
    if len(types) == 1:
        return types.pop(), None
    if types == {int, float}:
        return float, float
    return str, str
