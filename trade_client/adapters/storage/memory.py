# trade_client/adapters/storage/memory.py
"""
In-Memory Key-Value Store for testing and short-lived sessions
"""
from typing import Dict, Mapping, Optional


class InMemoryKeyValueStore:
    """
    Dict-backed key-value store

    Values are kept as strings, like browser local storage.
    """

    def __init__(self, initial: Optional[Mapping[str, object]] = None):
        self._items: Dict[str, str] = {
            key: str(value) for key, value in (initial or {}).items()
        }

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: object) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self):
        """Clear all items"""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)
