"""Persistence adapters for the address book."""

from addressbook.infrastructure.persistence.file_storage import (
    DEFAULT_STORAGE_FILEPATH,
    StorageFile,
)
from addressbook.infrastructure.persistence.memory_storage import InMemoryStorage

__all__ = ["DEFAULT_STORAGE_FILEPATH", "InMemoryStorage", "StorageFile"]
