"""File storage — implements StoragePort with a JSON document in a ``.txt`` file."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import PydanticUserError, TypeAdapter, ValidationError

from addressbook.domain.errors import (
    IllegalValueError,
    InvalidStorageFilePathError,
    StorageFailure,
    StorageOperationError,
)
from addressbook.domain.models.address_book import AddressBook
from addressbook.domain.ports.storage import StoragePort
from addressbook.infrastructure.persistence.schema import AdaptedAddressBook

logger = logging.getLogger(__name__)

# Default file path used if the user doesn't provide the file name.
DEFAULT_STORAGE_FILEPATH = "addressbook.txt"

_REQUIRED_SUFFIX = ".txt"


class StorageFile(StoragePort):
    """Persist the address book to a local text file.

    A missing file is treated as a first run: ``load()`` creates and saves an
    empty address book instead of failing.

    Parameters
    ----------
    file_path : str | Path
        Location of the storage file; must end with ``.txt``.
    indent : int
        JSON indentation used when writing.

    Raises
    ------
    InvalidStorageFilePathError
        If *file_path* does not end with ``.txt``.
    """

    def __init__(self, file_path: str | Path = DEFAULT_STORAGE_FILEPATH, indent: int = 2) -> None:
        try:
            self._adapter = TypeAdapter(AdaptedAddressBook)
        except PydanticUserError as exc:
            raise RuntimeError("Serialization engine initialisation error") from exc

        path = Path(file_path)
        if not self.is_valid_path(path):
            raise InvalidStorageFilePathError(
                f"Storage file should end with '{_REQUIRED_SUFFIX}'", str(path)
            )
        self._path = path
        self._indent = indent

    @staticmethod
    def is_valid_path(file_path: Path) -> bool:
        """True if *file_path* is acceptable as a storage file (ends with ``.txt``)."""
        return str(file_path).endswith(_REQUIRED_SUFFIX)

    @property
    def path(self) -> Path:
        return self._path

    # -- StoragePort ---------------------------------------------------------

    def load(self) -> AddressBook:
        """Load the address book from the storage file.

        Raises:
            StorageOperationError: With reason ``PARSE_ERROR``,
                ``MISSING_DATA``, ``ILLEGAL_VALUE`` or ``READ_ERROR``.
        """
        try:
            with self._path.open("r", encoding="utf-8") as fh:
                raw = fh.read()
        except FileNotFoundError:
            logger.info("Storage file %s not found; creating an empty address book", self._path)
            empty = AddressBook()
            self.save(empty)
            return empty
        except UnicodeDecodeError as exc:
            raise self._error("Error parsing file data format", StorageFailure.PARSE_ERROR) from exc
        except OSError as exc:
            raise self._error(
                f"Error reading from file: {self._path}", StorageFailure.READ_ERROR
            ) from exc

        try:
            loaded = self._adapter.validate_json(raw)
        except ValidationError as exc:
            raise self._error("Error parsing file data format", StorageFailure.PARSE_ERROR) from exc

        if loaded.is_any_required_field_missing():
            raise self._error("File data missing some elements", StorageFailure.MISSING_DATA)

        try:
            address_book = loaded.to_model_type()
        except IllegalValueError as exc:
            raise self._error(
                f"File contains illegal data values; data type constraints not met: {exc}",
                StorageFailure.ILLEGAL_VALUE,
                field=exc.field,
            ) from exc

        logger.debug("Loaded %d person(s) from %s", len(address_book), self._path)
        return address_book

    def save(self, address_book: AddressBook) -> None:
        """Write *address_book* to the storage file, overwriting it in full.

        Raises:
            StorageOperationError: With reason ``WRITE_ERROR``.
        """
        adapted = AdaptedAddressBook.from_model(address_book)
        data = self._adapter.dump_json(adapted, indent=self._indent or None).decode("utf-8")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8") as fh:
                fh.write(data)
        except OSError as exc:
            raise self._error(
                f"Error writing to file: {self._path}", StorageFailure.WRITE_ERROR
            ) from exc
        logger.info("Saved %d person(s) to %s", len(address_book), self._path)

    def get_path(self) -> str:
        return str(self._path)

    # -- Helpers -------------------------------------------------------------

    def _error(
        self,
        message: str,
        reason: StorageFailure,
        field: str | None = None,
    ) -> StorageOperationError:
        logger.warning("Storage operation on %s failed (%s): %s", self._path, reason.value, message)
        return StorageOperationError(message, reason, str(self._path), field=field)
