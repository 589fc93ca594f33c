"""Exceptions for table-of-records."""

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class TableOfRecordsError(Exception):
    """
    Base exception for all table-of-records errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause. Errors raised by the text sink itself are not wrapped
    and do not inherit from this class.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class InvalidArgumentError(TableOfRecordsError, ValueError):
    """
    Base exception for rejected arguments.

    Raised before any output is written, so the sink is left untouched.

    Attributes:
        argument: Name of the offending parameter (e.g. "collection")
    """

    def __init__(self, argument: str, message: str) -> None:
        self.argument = argument
        super().__init__(message)


# ---------------------------------------------------------------------------
# Argument Exceptions
# ---------------------------------------------------------------------------


class MissingArgumentError(InvalidArgumentError):
    """Raised when the collection or the sink is None."""

    def __init__(self, argument: str) -> None:
        super().__init__(argument, f"{argument} must not be None")


class EmptyCollectionError(InvalidArgumentError):
    """Raised when the collection contains no records."""

    def __init__(self, argument: str = "collection") -> None:
        super().__init__(argument, "Collection is empty")


class NoColumnsError(InvalidArgumentError):
    """
    Raised when the record type exposes no renderable scalar attributes.

    Attributes:
        record_type: The record type that was inspected
    """

    def __init__(self, record_type: type, argument: str = "collection") -> None:
        self.record_type = record_type
        super().__init__(
            argument,
            f"{record_type.__qualname__} has no public scalar attributes to render",
        )


class MixedRecordTypesError(InvalidArgumentError):
    """
    Raised when a record is not an instance of the first record's type.

    Attributes:
        expected: Type of the first record in the collection
        actual: Type of the offending record
        index: Iteration position of the offending record
    """

    def __init__(self, expected: type, actual: type, index: int) -> None:
        self.expected = expected
        self.actual = actual
        self.index = index
        super().__init__(
            "collection",
            f"Record {index} is {actual.__qualname__}, "
            f"expected {expected.__qualname__}",
        )
