"""Port: Storage — load/save the address book."""

from abc import ABC, abstractmethod

from addressbook.domain.models.address_book import AddressBook


class StoragePort(ABC):
    """Contract for persisting and retrieving the address book.

    Callers depend on this port only, never on a concrete backend.
    """

    @abstractmethod
    def load(self) -> AddressBook:
        """Load the address book.

        Raises:
            StorageOperationError: If the backing medium cannot be read or its
                content cannot be turned into a valid ``AddressBook``.
        """
        ...

    @abstractmethod
    def save(self, address_book: AddressBook) -> None:
        """Save *address_book*, replacing any previously stored content.

        Raises:
            StorageOperationError: If the backing medium cannot be written.
        """
        ...

    @abstractmethod
    def get_path(self) -> str:
        """Return the configured storage location."""
        ...
