"""Domain errors — custom exceptions for the address book.

These exceptions are raised by domain objects and storage backends and caught
by application or presentation layers. They carry no infrastructure
dependencies.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class AddressBookError(Exception):
    """Base exception for all address book errors."""


class IllegalValueError(AddressBookError):
    """Raised when a value does not satisfy a domain constraint."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class DuplicatePersonError(IllegalValueError):
    """Raised when an operation would add a person that already exists."""

    def __init__(self, message: str = "This person already exists in the address book") -> None:
        super().__init__(message, field="persons")


class DuplicateTagError(IllegalValueError):
    """Raised when an operation would add a tag that already exists."""

    def __init__(self, message: str = "This tag already exists in the address book") -> None:
        super().__init__(message, field="tags")


class PersonNotFoundError(AddressBookError):
    """Raised when a person cannot be found by index."""


class ConfigurationError(AddressBookError):
    """Raised when configuration is invalid."""


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------


class StorageFailure(str, Enum):
    """Why a storage operation failed."""

    INVALID_PATH = "invalid_path"
    PARSE_ERROR = "parse_error"
    MISSING_DATA = "missing_data"
    ILLEGAL_VALUE = "illegal_value"
    READ_ERROR = "read_error"
    WRITE_ERROR = "write_error"


class StorageOperationError(AddressBookError):
    """Raised when a storage backend cannot load or save the address book.

    Attributes:
        reason: The :class:`StorageFailure` kind.
        path: The storage location involved.
        field: The offending field, for ``ILLEGAL_VALUE`` failures.
    """

    def __init__(
        self,
        message: str,
        reason: StorageFailure,
        path: str,
        field: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.path = path
        self.field = field


class InvalidStorageFilePathError(StorageOperationError):
    """Raised at construction when a storage file path is not acceptable."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message, StorageFailure.INVALID_PATH, path)
