"""Address book configuration package."""

from addressbook.config.loader import get_config, load_config
from addressbook.config.models import AddressBookConfig

__all__ = ["AddressBookConfig", "get_config", "load_config"]
