"""Persisted schema — the serialization-shaped mirror of the address book.

Every field is optional at the parsing level so that a structurally valid
document with absent values still deserializes. Validation then happens in
two separate steps:

1. ``is_any_required_field_missing()`` — completeness ("is it there").
2. ``to_model_type()`` — domain validity ("is it well-formed"), raising
   :class:`~addressbook.domain.errors.IllegalValueError`.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from addressbook.domain.errors import IllegalValueError
from addressbook.domain.models.address_book import AddressBook
from addressbook.domain.models.person import (
    Address,
    Email,
    Name,
    Person,
    Phone,
    Tag,
    validated,
)


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------


class AdaptedTag(BaseModel):
    """Persisted form of a :class:`Tag`."""

    name: Optional[str] = None

    @classmethod
    def from_model(cls, tag: Tag) -> AdaptedTag:
        return cls(name=tag.name)

    def is_any_required_field_missing(self) -> bool:
        return self.name is None

    def to_model_type(self, field: str = "name") -> Tag:
        return validated(Tag, field, name=self.name)


class AdaptedContactDetail(BaseModel):
    """Persisted form of a phone, email or address with its privacy flag."""

    value: Optional[str] = None
    is_private: bool = False

    @field_validator("is_private", mode="before")
    @classmethod
    def _null_as_public(cls, v: Any) -> Any:
        return False if v is None else v

    @classmethod
    def from_model(cls, detail: Phone | Email | Address) -> AdaptedContactDetail:
        return cls(value=detail.value, is_private=detail.is_private)

    def is_any_required_field_missing(self) -> bool:
        return self.value is None


# ---------------------------------------------------------------------------
# Person
# ---------------------------------------------------------------------------


class AdaptedPerson(BaseModel):
    """Persisted form of a :class:`Person`."""

    name: Optional[str] = None
    phone: Optional[AdaptedContactDetail] = None
    email: Optional[AdaptedContactDetail] = None
    address: Optional[AdaptedContactDetail] = None
    tagged: list[AdaptedTag] = Field(default_factory=list)

    @field_validator("tagged", mode="before")
    @classmethod
    def _null_as_untagged(cls, v: Any) -> Any:
        return [] if v is None else v

    @classmethod
    def from_model(cls, person: Person) -> AdaptedPerson:
        return cls(
            name=person.name.full_name,
            phone=AdaptedContactDetail.from_model(person.phone),
            email=AdaptedContactDetail.from_model(person.email),
            address=AdaptedContactDetail.from_model(person.address),
            tagged=[AdaptedTag.from_model(tag) for tag in person.tags],
        )

    def is_any_required_field_missing(self) -> bool:
        if self.name is None:
            return True
        for detail in (self.phone, self.email, self.address):
            if detail is None or detail.is_any_required_field_missing():
                return True
        return any(tag.is_any_required_field_missing() for tag in self.tagged)

    def to_model_type(self) -> Person:
        """Convert to a :class:`Person`.

        Must only be called once ``is_any_required_field_missing()`` is False.

        Raises:
            IllegalValueError: If a value violates a domain constraint.
        """
        return Person(
            name=validated(Name, "name", full_name=self.name),
            phone=validated(Phone, "phone", value=self.phone.value, is_private=self.phone.is_private),
            email=validated(Email, "email", value=self.email.value, is_private=self.email.is_private),
            address=validated(
                Address, "address", value=self.address.value, is_private=self.address.is_private
            ),
            tags=[tag.to_model_type(f"tagged[{i}]") for i, tag in enumerate(self.tagged)],
        )


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class AdaptedAddressBook(BaseModel):
    """Root of the persisted document."""

    persons: list[AdaptedPerson] = Field(default_factory=list)
    tags: list[AdaptedTag] = Field(default_factory=list)

    @field_validator("persons", "tags", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @classmethod
    def from_model(cls, address_book: AddressBook) -> AdaptedAddressBook:
        return cls(
            persons=[AdaptedPerson.from_model(p) for p in address_book.persons],
            tags=[AdaptedTag.from_model(t) for t in address_book.tags],
        )

    def is_any_required_field_missing(self) -> bool:
        """True if any person, contact detail or tag lacks a required value."""
        return any(p.is_any_required_field_missing() for p in self.persons) or any(
            t.is_any_required_field_missing() for t in self.tags
        )

    def to_model_type(self) -> AddressBook:
        """Convert to an :class:`AddressBook`.

        Raises:
            IllegalValueError: If a value violates a domain constraint or the
                data holds duplicate persons or tags. ``field`` locates the
                offending value, e.g. ``persons[2].phone``.
        """
        tags = [tag.to_model_type(f"tags[{i}]") for i, tag in enumerate(self.tags)]
        persons = []
        for i, adapted in enumerate(self.persons):
            try:
                persons.append(adapted.to_model_type())
            except IllegalValueError as exc:
                raise IllegalValueError(str(exc), field=f"persons[{i}].{exc.field}") from exc
        return AddressBook.from_records(persons, tags)
