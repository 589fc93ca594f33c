#!/usr/bin/env python3
"""
Basic Table Example

Demonstrates the core table-of-records API with a few record styles.

Run:
    uv run python examples/basic_table.py
"""

import sys
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import NamedTuple

from table_of_records import (
    AttributeDescriptor,
    AttributeKind,
    EmptyCollectionError,
    TableOptions,
    format_table,
    write_table,
)


@dataclass
class Order:
    id: int
    customer: str
    total: Decimal
    shipped: bool
    placed: date
    note: str | None = None


class Point(NamedTuple):
    x: float
    y: float
    label: str


class Temperature:
    """Chooses its own columns instead of relying on annotations."""

    def __init__(self, city: str, celsius: float) -> None:
        self.city = city
        self.celsius = celsius

    @classmethod
    def __table_attributes__(cls) -> list[AttributeDescriptor]:
        return [
            AttributeDescriptor.for_attribute("city", AttributeKind.TEXT_LIKE),
            AttributeDescriptor(
                "fahrenheit", AttributeKind.NUMERIC, lambda t: t.celsius * 9 / 5 + 32
            ),
        ]


def main() -> None:
    orders = [
        Order(1, "Ann", Decimal("19.99"), True, date(2024, 5, 1)),
        Order(1024, "Bartholomew", Decimal("5.00"), False, date(2024, 5, 3), note="gift wrap"),
    ]

    print("=== Dataclass records ===\n")
    write_table(orders, sys.stdout)

    print("\n=== NamedTuple records ===\n")
    print(format_table([Point(0.5, 2.0, "a"), Point(10.25, -3.0, "origin-ish")]), end="")

    print("\n=== Records listing their own columns ===\n")
    write_table([Temperature("Oslo", -3.5), Temperature("Lisbon", 21.0)], sys.stdout)

    print("\n=== Null text option ===\n")
    write_table(orders, sys.stdout, TableOptions(null_text="-"))

    print("\n=== Empty input is rejected ===\n")
    try:
        write_table([], sys.stdout)
    except EmptyCollectionError as e:
        print(f"Rejected: {e}")


if __name__ == "__main__":
    main()
