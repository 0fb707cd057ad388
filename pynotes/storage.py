"""
Client-local key/value storage.

A small string-to-string store in the spirit of browser ``localStorage``:
values are opaque text, callers do their own encoding.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from typing import Dict, Optional

LOGGER = logging.getLogger(__name__)


class MemoryStorage:
    """In-process store; contents vanish with the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JSONFileStorage:
    """
    Durable store backed by a single JSON object file.

    Every write rewrites the whole file through a temp file and ``os.replace``,
    so readers never see a half-written document. A missing or unreadable
    file behaves as an empty store.
    """

    def __init__(self, path: str):
        self.path = os.path.expanduser(path)

    def _read_all(self) -> Dict[str, str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (json.JSONDecodeError, OSError) as exc:
            LOGGER.warning("Could not read storage file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            LOGGER.warning("Storage file %s is not a JSON object, ignoring", self.path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, items: Dict[str, str]) -> None:
        directory = os.path.dirname(self.path) or "."
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".storage-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f, indent=2)
            os.chmod(tmp_path, 0o600)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)
        LOGGER.debug("Stored key %s in %s", key, self.path)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if items.pop(key, None) is not None:
            self._write_all(items)
