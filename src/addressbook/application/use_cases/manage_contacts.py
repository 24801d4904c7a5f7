"""Use Case: Manage Contacts.

CRUD operations on the address book, persisted via StoragePort. Every
mutation saves the whole book immediately.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from addressbook.domain.errors import PersonNotFoundError
from addressbook.domain.models.address_book import AddressBook
from addressbook.domain.models.person import Person
from addressbook.domain.ports.storage import StoragePort

logger = logging.getLogger(__name__)


class ManageContactsUseCase:
    """CRUD + persistence for the address book."""

    def __init__(self, storage: StoragePort) -> None:
        self._storage = storage
        self._book: AddressBook | None = None

    # -- Persistence ---------------------------------------------------------

    def load(self) -> AddressBook:
        """(Re)load the address book from storage."""
        self._book = self._storage.load()
        return self._book

    @property
    def address_book(self) -> AddressBook:
        if self._book is None:
            return self.load()
        return self._book

    @property
    def storage_path(self) -> str:
        return self._storage.get_path()

    def _working_copy(self) -> AddressBook:
        return self.address_book.model_copy(deep=True)

    def _commit(self, book: AddressBook) -> None:
        """Save *book* and only then make it the current book."""
        self._storage.save(book)
        self._book = book

    # -- CRUD ----------------------------------------------------------------

    def list_all(self) -> list[Person]:
        """All persons in insertion order."""
        return list(self.address_book.persons)

    def add(self, person: Person) -> None:
        """Add a person and save (raises DuplicatePersonError on duplicates)."""
        book = self._working_copy()
        book.add_person(person)
        self._commit(book)
        logger.info("Added %s", person.name)

    def delete(self, index: int) -> Person:
        """Delete the person at the 1-based *index*, save, and return it."""
        persons = self.address_book.persons
        if index < 1 or index > len(persons):
            raise PersonNotFoundError(f"No person at index {index}.")
        target = persons[index - 1]
        book = self._working_copy()
        book.remove_person(target)
        self._commit(book)
        logger.info("Deleted %s", target.name)
        return target

    def find(self, keywords: Iterable[str]) -> list[Person]:
        """Persons whose name contains any of *keywords* as a whole word."""
        wanted = set(keywords)
        return [p for p in self.address_book.persons if wanted.intersection(p.name.words)]

    def clear(self) -> None:
        """Remove every person and tag, then save."""
        book = self._working_copy()
        book.clear()
        self._commit(book)
        logger.info("Cleared address book at %s", self.storage_path)
