"""
Track which notes belong to this client.

There is no login: "ownership" is simply the ordered list of note ids this
client created or opened, kept in client-local storage under one key. The
tracker knows nothing about note content and never asks the server whether
an id still exists. Callers keep it in step with the service: ``add`` after a
successful create, ``remove`` after a successful delete.
"""

from __future__ import annotations

import json
import logging
import threading
from typing import Iterator, List

LOGGER = logging.getLogger(__name__)

DEFAULT_KEY = "noteIds"


class OwnershipTracker:
    """Ordered, duplicate-free set of note ids mirrored to storage on every change."""

    def __init__(self, storage, key: str = DEFAULT_KEY):
        self._storage = storage
        self._key = key
        self._ids: List[int] = []
        self._lock = threading.Lock()

    @property
    def key(self) -> str:
        return self._key

    @property
    def ids(self) -> List[int]:
        with self._lock:
            return list(self._ids)

    def __contains__(self, note_id: object) -> bool:
        with self._lock:
            return note_id in self._ids

    def __iter__(self) -> Iterator[int]:
        return iter(self.ids)

    def __len__(self) -> int:
        with self._lock:
            return len(self._ids)

    def load(self) -> List[int]:
        """Read the saved ids; corrupt or missing data means no saved ids."""
        with self._lock:
            self._ids = self._parse(self._storage.get_item(self._key))
            LOGGER.debug("Loaded %d owned note ids", len(self._ids))
            return list(self._ids)

    def add(self, note_id: int) -> None:
        note_id = self._coerce(note_id)
        with self._lock:
            ids = list(self._ids)
            if note_id not in ids:
                ids.append(note_id)
            self._persist(ids)

    def remove(self, note_id: int) -> None:
        note_id = self._coerce(note_id)
        with self._lock:
            self._persist([nid for nid in self._ids if nid != note_id])

    @staticmethod
    def _coerce(note_id) -> int:
        if isinstance(note_id, bool):
            raise TypeError(f"Note id must be an integer, not {note_id!r}")
        return int(note_id)

    def _persist(self, ids: List[int]) -> None:
        # Memory only follows once storage accepted the write
        self._storage.set_item(self._key, json.dumps(ids))
        self._ids = ids

    def _parse(self, raw) -> List[int]:
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            LOGGER.warning("Ignoring unparseable %s value in storage", self._key)
            return []
        if not isinstance(data, list) or not all(
            isinstance(v, int) and not isinstance(v, bool) for v in data
        ):
            LOGGER.warning("Ignoring malformed %s value in storage", self._key)
            return []
        ids: List[int] = []
        for v in data:
            if v not in ids:
                ids.append(v)
        return ids
