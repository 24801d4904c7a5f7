"""Person-related domain models.

Contains the Name, Phone, Email, Address and Tag value objects and the
Person entity. These are Pydantic models; every constraint violation surfaces
as a ``pydantic.ValidationError`` whose message is one of the ``*_CONSTRAINTS``
strings below. ``validated()`` re-raises those as ``IllegalValueError``.

This module belongs to the Domain layer. It only depends on:
- Python stdlib (re)
- Pydantic (pragmatic exception for validation)
- Domain errors
"""

from __future__ import annotations

import re
from typing import Any, TypeVar

from pydantic import BaseModel, Field, ValidationError, field_validator

from addressbook.domain.errors import DuplicateTagError, IllegalValueError

NAME_CONSTRAINTS = "Person names should be spaces or alphanumeric characters"
PHONE_CONSTRAINTS = "Person phone numbers should only contain numbers"
EMAIL_CONSTRAINTS = "Person emails should be 2 alphanumeric/period strings separated by '@'"
ADDRESS_CONSTRAINTS = "Person addresses can be in any format"
TAG_CONSTRAINTS = "Tags names should be alphanumeric"

_EMAIL_PATTERN = re.compile(r"[\w.]+@[\w.]+")

_M = TypeVar("_M", bound=BaseModel)


def validated(model_cls: type[_M], field: str, **data: Any) -> _M:
    """Build *model_cls* from *data*, raising IllegalValueError on rejection.

    The error message is the violated constraint; ``field`` is attached to it.
    """
    try:
        return model_cls(**data)
    except ValidationError as exc:
        error = exc.errors()[0]
        cause = error.get("ctx", {}).get("error")
        message = str(cause) if cause is not None else error["msg"]
        raise IllegalValueError(message, field=field) from exc


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------


class Name(BaseModel):
    """A person's full name."""

    full_name: str

    @field_validator("full_name")
    @classmethod
    def _validate_full_name(cls, v: str) -> str:
        v = v.strip()
        if not v or not all(ch.isalnum() or ch == " " for ch in v):
            raise ValueError(NAME_CONSTRAINTS)
        return v

    @property
    def words(self) -> list[str]:
        """Name split on whitespace, used for keyword search."""
        return self.full_name.split()

    def __str__(self) -> str:
        return self.full_name


class Phone(BaseModel):
    """A phone number; digits only."""

    value: str
    is_private: bool = False

    @field_validator("value")
    @classmethod
    def _validate_value(cls, v: str) -> str:
        v = v.strip()
        if not v.isdigit() or not v.isascii():
            raise ValueError(PHONE_CONSTRAINTS)
        return v

    def __str__(self) -> str:
        return self.value


class Email(BaseModel):
    """An email address of the form ``local@domain``."""

    value: str
    is_private: bool = False

    @field_validator("value")
    @classmethod
    def _validate_value(cls, v: str) -> str:
        v = v.strip()
        if not _EMAIL_PATTERN.fullmatch(v):
            raise ValueError(EMAIL_CONSTRAINTS)
        return v

    def __str__(self) -> str:
        return self.value


class Address(BaseModel):
    """A postal address; any non-empty text."""

    value: str
    is_private: bool = False

    @field_validator("value")
    @classmethod
    def _validate_value(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError(ADDRESS_CONSTRAINTS)
        return v

    def __str__(self) -> str:
        return self.value


class Tag(BaseModel):
    """A single-word label attached to persons."""

    name: str

    @field_validator("name")
    @classmethod
    def _validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v or not v.isalnum():
            raise ValueError(TAG_CONSTRAINTS)
        return v

    def __str__(self) -> str:
        return f"[{self.name}]"


# ---------------------------------------------------------------------------
# Person
# ---------------------------------------------------------------------------


class Person(BaseModel):
    """A contact in the address book."""

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: list[Tag] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def _unique_tags(cls, v: list[Tag]) -> list[Tag]:
        for i, tag in enumerate(v):
            if tag in v[:i]:
                raise DuplicateTagError(f"Duplicate tag for this person: {tag}")
        return v

    def is_same_person(self, other: Person) -> bool:
        """True if *other* has the same identity fields (tags are ignored)."""
        return (
            self.name.full_name == other.name.full_name
            and self.phone.value == other.phone.value
            and self.email.value == other.email.value
            and self.address.value == other.address.value
        )

    def as_text(self, show_private: bool = False) -> str:
        """Single-line representation; private details are hidden by default."""
        parts = [self.name.full_name]
        for label, detail in (
            ("Phone", self.phone),
            ("Email", self.email),
            ("Address", self.address),
        ):
            if detail.is_private and not show_private:
                continue
            parts.append(f"{label}: {detail.value}")
        text = " ".join(parts)
        if self.tags:
            text += " Tags: " + "".join(str(tag) for tag in self.tags)
        return text

    @classmethod
    def create(
        cls,
        name: str,
        phone: str,
        email: str,
        address: str,
        tags: list[str] | None = None,
        private_phone: bool = False,
        private_email: bool = False,
        private_address: bool = False,
    ) -> Person:
        """Build a person from raw strings.

        Raises:
            IllegalValueError: If any value violates its constraint.
        """
        return cls(
            name=validated(Name, "name", full_name=name),
            phone=validated(Phone, "phone", value=phone, is_private=private_phone),
            email=validated(Email, "email", value=email, is_private=private_email),
            address=validated(Address, "address", value=address, is_private=private_address),
            tags=[validated(Tag, "tags", name=tag) for tag in tags or []],
        )
