"""Domain models — public API.

Provides convenient imports for the most commonly used domain entities.
"""

from addressbook.domain.models.address_book import AddressBook
from addressbook.domain.models.person import (
    Address,
    Email,
    Name,
    Person,
    Phone,
    Tag,
)

__all__ = [
    "AddressBook",
    # Person
    "Address",
    "Email",
    "Name",
    "Person",
    "Phone",
    "Tag",
]
