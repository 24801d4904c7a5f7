"""AddressBook aggregate — the in-memory contact list.

This module belongs to the Domain layer. It only depends on:
- Pydantic (pragmatic exception for validation)
- Domain person models and errors
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field, model_validator

from addressbook.domain.errors import (
    DuplicatePersonError,
    DuplicateTagError,
    PersonNotFoundError,
)
from addressbook.domain.models.person import Person, Tag


class AddressBook(BaseModel):
    """Manages the persons of the address book and its master tag list.

    Guarantees:
    - no two persons share the same identity fields (see ``Person.is_same_person``)
    - no duplicate tags in the master list
    - every tag used by a person is in the master list
    """

    persons: list[Person] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)

    @model_validator(mode="after")
    def _enforce_uniqueness(self) -> AddressBook:
        """Apply the guarantees above to data passed to the constructor."""
        for i, tag in enumerate(self.tags):
            if tag in self.tags[:i]:
                raise DuplicateTagError()
        for i, person in enumerate(self.persons):
            if any(other.is_same_person(person) for other in self.persons[:i]):
                raise DuplicatePersonError()
            for tag in person.tags:
                if tag not in self.tags:
                    self.tags.append(tag)
        return self

    @classmethod
    def from_records(cls, persons: Iterable[Person], tags: Iterable[Tag]) -> AddressBook:
        """Build a book, enforcing the uniqueness rules on every record.

        Raises:
            DuplicateTagError: If *tags* contains a duplicate.
            DuplicatePersonError: If *persons* contains a duplicate.
        """
        book = cls()
        for tag in tags:
            book.add_tag(tag)
        for person in persons:
            book.add_person(person)
        return book

    # -- Persons -------------------------------------------------------------

    def contains_person(self, person: Person) -> bool:
        return any(existing.is_same_person(person) for existing in self.persons)

    def add_person(self, person: Person) -> None:
        """Add *person*, merging its tags into the master tag list."""
        if self.contains_person(person):
            raise DuplicatePersonError()
        for tag in person.tags:
            if tag not in self.tags:
                self.tags.append(tag)
        self.persons.append(person)

    def remove_person(self, person: Person) -> None:
        for i, existing in enumerate(self.persons):
            if existing.is_same_person(person):
                del self.persons[i]
                return
        raise PersonNotFoundError(f"Person not found: {person.name}")

    # -- Tags ----------------------------------------------------------------

    def add_tag(self, tag: Tag) -> None:
        if tag in self.tags:
            raise DuplicateTagError()
        self.tags.append(tag)

    # -- Bulk ----------------------------------------------------------------

    def clear(self) -> None:
        """Remove all persons and tags."""
        self.persons.clear()
        self.tags.clear()

    def __len__(self) -> int:
        return len(self.persons)
