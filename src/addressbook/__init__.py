"""Address book — a contact list persisted to a local file."""

__version__ = "0.1.0"
