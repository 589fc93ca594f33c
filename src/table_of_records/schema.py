"""
Attribute discovery for record types.

A record type is turned into an ordered tuple of AttributeDescriptor, one per
public scalar attribute. The tuple fixes the column order of a table.

Discovery strategies, first match wins:
- Types defining ``__table_attributes__()`` describe themselves
- Dataclasses: fields in declaration order, then scalar properties
- NamedTuples: ``_fields`` in order
- Plain classes: annotated public names (base classes first), then scalar
  properties; classes without annotated names use the sample record's
  instance attributes, then scalar properties

Example:
    @dataclass
    class Person:
        id: int
        name: str

    describe_record_type(Person)
    # (AttributeDescriptor(name='id', kind=NUMERIC, ...),
    #  AttributeDescriptor(name='name', kind=TEXT_LIKE, ...))
"""

from __future__ import annotations

import dataclasses
import datetime
import enum
import inspect
import logging
import types
import typing
import uuid
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, Protocol

logger = logging.getLogger(__name__)

NUMERIC_TYPES: tuple[type, ...] = (int, float, complex, Decimal, Fraction)

# Scalars that are neither text nor numbers; checked before NUMERIC_TYPES
# because bool and IntEnum are int subclasses
OTHER_SCALAR_TYPES: tuple[type, ...] = (
    bool,
    bytes,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
    enum.Enum,
)


class AttributeKind(enum.Enum):
    """Classification of a scalar attribute, used for alignment."""

    NUMERIC = "numeric"
    TEXT_LIKE = "text"
    OTHER = "other"


@dataclass(frozen=True)
class AttributeDescriptor:
    """
    One renderable scalar attribute of a record type.

    Attributes:
        name: Attribute name, used as the column header
        kind: Scalar classification of the attribute's declared type
        accessor: Reads the attribute's value from a record
    """

    name: str
    kind: AttributeKind
    accessor: Callable[[Any], Any]

    @classmethod
    def for_attribute(cls, name: str, kind: AttributeKind) -> AttributeDescriptor:
        """Create a descriptor that reads ``record.<name>``.

        Records that never set the attribute read as None.
        """
        return cls(name=name, kind=kind, accessor=lambda record: getattr(record, name, None))

    @property
    def alignment(self) -> str:
        """'l' for text-like attributes, 'r' for everything else."""
        return "l" if self.kind is AttributeKind.TEXT_LIKE else "r"

    def format(self, record: Any, null_text: str = "") -> str:
        """Read this attribute from ``record`` and convert it to text."""
        return stringify(self.accessor(record), null_text)


class TabularRecord(Protocol):
    """Protocol for record types that list their own columns."""

    @classmethod
    def __table_attributes__(cls) -> Iterable[AttributeDescriptor]:
        """Return descriptors for the columns of this type, in column order."""
        ...


def stringify(value: Any, null_text: str = "") -> str:
    """
    Convert a scalar value to its cell text.

    None becomes ``null_text``, enum members render as their name and
    everything else goes through ``str()``.
    """
    if value is None:
        return null_text
    if isinstance(value, enum.Enum):
        return value.name
    return str(value)


def classify_type(annotation: Any) -> AttributeKind | None:
    """
    Classify a type annotation as a scalar kind.

    ``Optional[X]`` and ``X | None`` are unwrapped to ``X``.

    Returns:
        The AttributeKind, or None if the annotation is not a scalar type
    """
    annotation = _unwrap_optional(annotation)
    if typing.get_origin(annotation) is not None or not isinstance(annotation, type):
        return None
    if issubclass(annotation, str):
        return AttributeKind.TEXT_LIKE
    if issubclass(annotation, OTHER_SCALAR_TYPES):
        return AttributeKind.OTHER
    if issubclass(annotation, NUMERIC_TYPES):
        return AttributeKind.NUMERIC
    return None


def classify_value(value: Any) -> AttributeKind | None:
    """Classify a runtime value. None counts as an OTHER scalar."""
    if value is None:
        return AttributeKind.OTHER
    return classify_type(type(value))


def describe_record_type(
    record_type: type,
    sample: Any = None,
) -> tuple[AttributeDescriptor, ...]:
    """
    Discover the renderable scalar attributes of a record type.

    Args:
        record_type: Type of the records being rendered
        sample: A record of that type, used to classify attributes
            that carry no usable annotation

    Returns:
        Descriptors in column order; empty if the type has no public
        scalar attributes

    Raises:
        TypeError: If ``__table_attributes__`` yields something other
            than AttributeDescriptor instances
    """
    if hasattr(record_type, "__table_attributes__"):
        descriptors = tuple(record_type.__table_attributes__())
        for descriptor in descriptors:
            if not isinstance(descriptor, AttributeDescriptor):
                raise TypeError(
                    f"{record_type.__qualname__}.__table_attributes__() must yield "
                    f"AttributeDescriptor, got {type(descriptor).__qualname__}"
                )
        strategy = "explicit"
    elif dataclasses.is_dataclass(record_type):
        names = [f.name for f in dataclasses.fields(record_type)]
        descriptors = _describe(record_type, names, sample)
        strategy = "dataclass"
    elif issubclass(record_type, tuple) and hasattr(record_type, "_fields"):
        descriptors = _describe(record_type, list(record_type._fields), sample)
        strategy = "namedtuple"
    else:
        names = _annotated_names(record_type)
        if names:
            descriptors = _describe(record_type, names, sample)
            strategy = "annotations"
        else:
            instance = _describe_instance(sample)
            seen = {d.name for d in instance}
            descriptors = instance + _describe_properties(record_type, seen)
            strategy = "instance"

    logger.debug(
        "Discovered %d column(s) on %s via %s: %s",
        len(descriptors),
        record_type.__qualname__,
        strategy,
        ", ".join(d.name for d in descriptors),
    )
    return descriptors


def _describe(
    record_type: type,
    names: list[str],
    sample: Any,
) -> tuple[AttributeDescriptor, ...]:
    """Build descriptors for declared names followed by scalar properties."""
    hints = _type_hints(record_type)
    descriptors: list[AttributeDescriptor] = []

    for name in names:
        if name.startswith("_"):
            continue
        if name in hints:
            kind = classify_type(hints[name])
        elif sample is not None:
            kind = classify_value(getattr(sample, name, None))
        else:
            kind = None
        if kind is not None:
            descriptors.append(AttributeDescriptor.for_attribute(name, kind))

    return tuple(descriptors) + _describe_properties(record_type, set(names))


def _describe_properties(
    record_type: type,
    seen: set[str],
) -> tuple[AttributeDescriptor, ...]:
    """Descriptors for public properties with a scalar return annotation."""
    descriptors: list[AttributeDescriptor] = []
    for name in _property_names(record_type):
        if name in seen:
            continue
        prop = inspect.getattr_static(record_type, name)
        kind = classify_type(_type_hints(prop.fget).get("return"))
        if kind is not None:
            descriptors.append(AttributeDescriptor.for_attribute(name, kind))
    return tuple(descriptors)


def _describe_instance(sample: Any) -> tuple[AttributeDescriptor, ...]:
    """Build descriptors from the public instance attributes of a record."""
    descriptors: list[AttributeDescriptor] = []
    for name, value in getattr(sample, "__dict__", {}).items():
        if name.startswith("_"):
            continue
        kind = classify_value(value)
        if kind is not None:
            descriptors.append(AttributeDescriptor.for_attribute(name, kind))
    return tuple(descriptors)


def _annotated_names(record_type: type) -> list[str]:
    """Public annotated names across the MRO, base classes first."""
    names: dict[str, None] = {}
    for klass in reversed(record_type.__mro__):
        if klass is object:
            continue
        for name in inspect.get_annotations(klass):
            if not name.startswith("_"):
                names.setdefault(name, None)
    return list(names)


def _property_names(record_type: type) -> list[str]:
    """Public property names across the MRO, base classes first."""
    names: dict[str, None] = {}
    for klass in reversed(record_type.__mro__):
        for name, member in vars(klass).items():
            if isinstance(member, property) and not name.startswith("_"):
                names.setdefault(name, None)
    return list(names)


def _type_hints(obj: Any) -> dict[str, Any]:
    """Resolve type hints, or return {} when forward references can't be resolved."""
    if obj is None:
        return {}
    try:
        return typing.get_type_hints(obj)
    except (NameError, TypeError) as e:
        logger.debug("Unresolvable annotations on %r: %s", obj, e)
        return {}


def _unwrap_optional(annotation: Any) -> Any:
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
        return None
    return annotation
