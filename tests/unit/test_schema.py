"""Tests for attribute discovery."""

from __future__ import annotations

import datetime
import uuid
from decimal import Decimal
from fractions import Fraction
from typing import Optional, Union

import pytest

from table_of_records import (
    AttributeDescriptor,
    AttributeKind,
    describe_record_type,
    stringify,
)
from table_of_records.schema import classify_type, classify_value
from tests.fixtures.records import (
    Account,
    Bare,
    Color,
    Employee,
    LegacyPoint,
    Nested,
    Opaque,
    Person,
    Point,
    Product,
    Reading,
    Sparse,
    WithHelper,
)


def _columns(record_type: type, sample: object = None) -> list[tuple[str, AttributeKind]]:
    return [(d.name, d.kind) for d in describe_record_type(record_type, sample)]


class TestClassifyType:
    """Tests for classify_type."""

    @pytest.mark.parametrize("annotation", [int, float, complex, Decimal, Fraction])
    def test_numeric(self, annotation: type) -> None:
        assert classify_type(annotation) is AttributeKind.NUMERIC

    def test_text(self) -> None:
        assert classify_type(str) is AttributeKind.TEXT_LIKE

    @pytest.mark.parametrize(
        "annotation",
        [bool, bytes, datetime.date, datetime.datetime, datetime.timedelta, uuid.UUID, Color],
    )
    def test_other(self, annotation: type) -> None:
        assert classify_type(annotation) is AttributeKind.OTHER

    def test_optional_unwrapped(self) -> None:
        assert classify_type(Optional[str]) is AttributeKind.TEXT_LIKE
        assert classify_type(int | None) is AttributeKind.NUMERIC

    @pytest.mark.parametrize(
        "annotation",
        [list[int], dict[str, int], Union[int, str], Person, object, None, "int"],
    )
    def test_non_scalar(self, annotation: object) -> None:
        assert classify_type(annotation) is None

    def test_classify_value(self) -> None:
        assert classify_value("a") is AttributeKind.TEXT_LIKE
        assert classify_value(3) is AttributeKind.NUMERIC
        assert classify_value(None) is AttributeKind.OTHER
        assert classify_value([1]) is None


class TestDescribeRecordType:
    """Tests for describe_record_type strategies."""

    def test_dataclass_declaration_order(self) -> None:
        assert _columns(Person) == [
            ("Id", AttributeKind.NUMERIC),
            ("Name", AttributeKind.TEXT_LIKE),
        ]

    def test_dataclass_skips_non_scalars_and_private(self) -> None:
        """Lists, private fields and unannotated properties get no column."""
        names = [name for name, _ in _columns(Product)]
        assert names == [
            "sku",
            "price",
            "quantity",
            "weight",
            "in_stock",
            "grade",
            "color",
            "added",
            "notes",
            "total",
        ]

    def test_dataclass_property_kind(self) -> None:
        assert dict(_columns(Product))["total"] is AttributeKind.NUMERIC

    def test_dataclass_inheritance(self) -> None:
        assert [name for name, _ in _columns(Employee)] == ["Id", "Name", "Department"]

    def test_nested_only_has_no_columns(self) -> None:
        assert describe_record_type(Nested) == ()

    def test_namedtuple(self) -> None:
        assert _columns(Point) == [
            ("x", AttributeKind.NUMERIC),
            ("y", AttributeKind.NUMERIC),
            ("label", AttributeKind.TEXT_LIKE),
        ]

    def test_untyped_namedtuple_uses_sample(self) -> None:
        sample = LegacyPoint(3, "p")
        assert _columns(LegacyPoint, sample) == [
            ("x", AttributeKind.NUMERIC),
            ("label", AttributeKind.TEXT_LIKE),
        ]

    def test_untyped_namedtuple_without_sample(self) -> None:
        assert describe_record_type(LegacyPoint) == ()

    def test_plain_class_annotations_and_properties(self) -> None:
        assert _columns(Account) == [
            ("owner", AttributeKind.TEXT_LIKE),
            ("balance", AttributeKind.NUMERIC),
            ("overdrawn", AttributeKind.OTHER),
        ]

    def test_instance_attributes(self) -> None:
        assert _columns(Bare, Bare("c", 1)) == [
            ("code", AttributeKind.TEXT_LIKE),
            ("count", AttributeKind.NUMERIC),
        ]

    def test_instance_attributes_with_unannotated_property(self) -> None:
        """Properties without annotations don't hide the instance attributes."""
        assert _columns(WithHelper, WithHelper("x1", 5)) == [
            ("code", AttributeKind.TEXT_LIKE),
            ("count", AttributeKind.NUMERIC),
            ("doubled", AttributeKind.NUMERIC),
        ]

    def test_explicit_table_attributes(self) -> None:
        descriptors = describe_record_type(Reading)
        assert [d.name for d in descriptors] == ["Value", "Sensor"]
        assert descriptors[1].format(Reading("abc", 1.0)) == "ABC"

    def test_explicit_table_attributes_validated(self) -> None:
        class Broken:
            @classmethod
            def __table_attributes__(cls):
                return ["not a descriptor"]

        with pytest.raises(TypeError, match="must yield AttributeDescriptor"):
            describe_record_type(Broken)

    def test_no_columns(self) -> None:
        assert describe_record_type(Opaque, Opaque()) == ()

    def test_unresolvable_annotation_falls_back_to_sample(self) -> None:
        class Forward:
            ref: UndefinedName  # type: ignore[name-defined]  # noqa: F821
            count: int

            def __init__(self) -> None:
                self.ref = "text"
                self.count = 1

        assert _columns(Forward, Forward()) == [
            ("ref", AttributeKind.TEXT_LIKE),
            ("count", AttributeKind.NUMERIC),
        ]


class TestAttributeDescriptor:
    """Tests for AttributeDescriptor."""

    def test_alignment(self) -> None:
        text = AttributeDescriptor.for_attribute("a", AttributeKind.TEXT_LIKE)
        number = AttributeDescriptor.for_attribute("b", AttributeKind.NUMERIC)
        other = AttributeDescriptor.for_attribute("c", AttributeKind.OTHER)

        assert text.alignment == "l"
        assert number.alignment == "r"
        assert other.alignment == "r"

    def test_for_attribute_reads_attribute(self) -> None:
        descriptor = AttributeDescriptor.for_attribute("Name", AttributeKind.TEXT_LIKE)
        assert descriptor.format(Person(1, "Ann")) == "Ann"

    def test_format_null_text(self) -> None:
        descriptor = AttributeDescriptor.for_attribute("Name", AttributeKind.TEXT_LIKE)
        assert descriptor.format(Person(1, None), null_text="-") == "-"  # type: ignore[arg-type]

    def test_for_attribute_missing_attribute_reads_none(self) -> None:
        descriptor = AttributeDescriptor.for_attribute("count", AttributeKind.NUMERIC)
        assert descriptor.accessor(Sparse("b", with_count=False)) is None
        assert descriptor.format(Sparse("b", with_count=False), null_text="-") == "-"


class TestStringify:
    """Tests for the to-string policy."""

    def test_none(self) -> None:
        assert stringify(None) == ""
        assert stringify(None, null_text="NULL") == "NULL"

    def test_enum_uses_name(self) -> None:
        assert stringify(Color.GREEN) == "GREEN"

    def test_bool(self) -> None:
        assert stringify(True) == "True"
        assert stringify(False) == "False"

    def test_default_str(self) -> None:
        assert stringify(Decimal("1.50")) == "1.50"
        assert stringify(2.5) == "2.5"
        assert stringify(datetime.date(2024, 3, 1)) == "2024-03-01"
