"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path

from addressbook.application.use_cases.manage_contacts import ManageContactsUseCase
from addressbook.config.loader import load_config
from addressbook.config.models import AddressBookConfig
from addressbook.domain.ports.storage import StoragePort
from addressbook.infrastructure.persistence.file_storage import StorageFile


class Container:
    """Simple dependency injection container.

    Usage::

        container = Container()
        uc = container.manage_contacts()
        uc.list_all()
    """

    def __init__(
        self,
        config_path: Path | None = None,
        storage_path: str | None = None,
    ) -> None:
        self._config: AddressBookConfig = load_config(config_path)
        # Raises InvalidStorageFilePathError for a bad path.
        self._storage: StoragePort = StorageFile(
            storage_path or self._config.storage_path,
            indent=self._config.json_indent,
        )

    @property
    def config(self) -> AddressBookConfig:
        return self._config

    @property
    def storage(self) -> StoragePort:
        return self._storage

    def manage_contacts(self) -> ManageContactsUseCase:
        return ManageContactsUseCase(self._storage)
