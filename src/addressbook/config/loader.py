"""Configuration loader for the address book.

Loads the JSON configuration file and returns a validated AddressBookConfig.
Uses module-level caching so each file is only parsed once per process.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import platformdirs
from pydantic import ValidationError

from addressbook.config.models import AddressBookConfig
from addressbook.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

_APP_NAME = "addressbook"
_CONFIG_FILENAME = "config.json"

# Module-level cache
_config_cache: dict[str, AddressBookConfig] = {}


def default_config_path() -> Path:
    """Location of the user config file in the platform config directory."""
    return Path(platformdirs.user_config_dir(_APP_NAME)) / _CONFIG_FILENAME


def load_config(path: Optional[Path] = None) -> AddressBookConfig:
    """Load and validate configuration from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a custom JSON config file. If ``None``, the user config file
        is used when it exists, otherwise the built-in defaults.

    Returns
    -------
    AddressBookConfig
        Validated configuration instance.

    Raises
    ------
    FileNotFoundError
        If an explicit *path* does not exist.
    ConfigurationError
        If the file cannot be read, is not valid JSON or does not match the schema.
    """
    config_path = Path(path) if path is not None else default_config_path()
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        if path is not None:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        logger.debug("No config file at %s; using defaults", config_path)
        config = AddressBookConfig()
    else:
        try:
            raw = json.loads(config_path.read_text(encoding="utf-8"))
            config = AddressBookConfig.model_validate(raw)
        except OSError as exc:
            raise ConfigurationError(f"Cannot read config file {config_path}: {exc}") from exc
        except (json.JSONDecodeError, ValidationError) as exc:
            raise ConfigurationError(f"Invalid config file {config_path}: {exc}") from exc

    _config_cache[cache_key] = config
    return config


def get_config() -> AddressBookConfig:
    """Get the default configuration (cached)."""
    return load_config()


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()
