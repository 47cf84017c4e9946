# trade_client/domain/ports/storage.py

"""
Key-Value Store Port - Interface for local persistent storage

The store is owned by authentication flows outside this package.
Order operations only read from it.
"""

from typing import Optional, Protocol


class IKeyValueStore(Protocol):
    """
    Interface for a string key-value store

    Mirrors the read side of browser local storage.
    """

    def get_item(self, key: str) -> Optional[str]:
        """
        Read a stored value

        Args:
            key: Storage key

        Returns:
            The stored string, or None if the key is absent
        """
        ...
