"""Port for string key-value storage."""

from typing import Protocol


class KeyValueStorePort(Protocol):
    """Port exposing a durable string key-value store."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None when the key is unknown."""

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""


__all__ = ["KeyValueStorePort"]
