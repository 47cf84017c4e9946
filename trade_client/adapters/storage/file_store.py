# trade_client/adapters/storage/file_store.py
"""
JSON File Key-Value Store Adapter

Persistent local storage for desktop and command-line sessions.
All items live in a single JSON object on disk.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from trade_client.domain.models import StoreError

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    """
    Key-value store persisted to a JSON file

    The file is read on every access so values written by another
    process (e.g. a login command) are picked up immediately.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Args:
            path: Location of the JSON file; '~' is expanded
        """
        self.path = Path(path).expanduser()

    def get_item(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        if value is None:
            return None
        return str(value)

    def set_item(self, key: str, value: object) -> None:
        items = self._read()
        items[key] = str(value)
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if key in items:
            del items[key]
            self._write(items)

    def clear(self) -> None:
        self._write({})

    def _read(self) -> Dict[str, object]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid store file {self.path}: {e}")
            return {}
        except OSError as e:
            logger.error(f"Failed to read store {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Store file {self.path} does not hold a JSON object")
            return {}
        return data

    def _write(self, items: Dict[str, object]) -> None:
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f"{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                json.dump(items, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error(f"Failed to write store {self.path}: {e}")
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise StoreError(f"Cannot write {self.path}: {e}") from e
