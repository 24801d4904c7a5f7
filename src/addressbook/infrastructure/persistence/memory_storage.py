"""In-memory storage — implements StoragePort without touching the filesystem."""

from __future__ import annotations

from addressbook.domain.models.address_book import AddressBook
from addressbook.domain.ports.storage import StoragePort


class InMemoryStorage(StoragePort):
    """Keep a private copy of the last saved address book.

    Useful for tests and throwaway sessions. Loading before any save returns
    an empty book.
    """

    PATH = ":memory:"

    def __init__(self, initial: AddressBook | None = None) -> None:
        self._data = initial.model_copy(deep=True) if initial is not None else AddressBook()

    def load(self) -> AddressBook:
        return self._data.model_copy(deep=True)

    def save(self, address_book: AddressBook) -> None:
        self._data = address_book.model_copy(deep=True)

    def get_path(self) -> str:
        return self.PATH
