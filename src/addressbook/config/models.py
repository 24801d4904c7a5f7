"""Pydantic models for address book configuration."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator

from addressbook.infrastructure.persistence.file_storage import DEFAULT_STORAGE_FILEPATH


class AddressBookConfig(BaseModel):
    """Settings read from ``config.json``."""

    storage_path: str = Field(
        default=DEFAULT_STORAGE_FILEPATH,
        description="Storage file, relative to the working directory unless absolute.",
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentation of the stored JSON document (0 writes it compactly).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Standard logging level name.",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unknown log level: '{v}'")
        return v
