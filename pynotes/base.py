"""Client entry point wiring configuration, HTTP session and services."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from pynotes.config import NotesConfig
from pynotes.services.notes import NotesService, OwnershipTracker
from pynotes.storage import JSONFileStorage

LOGGER = logging.getLogger(__name__)


class PyNotesService:
    """
    A notes client for one local profile.

    Usage:
        from pynotes import NotesConfig, PyNotesService
        api = PyNotesService(NotesConfig.from_env())
        note = api.notes.create(CreateNoteInput(title="T", body="B", tags=[]))
        api.ownership.add(note.id)
    """

    def __init__(
        self,
        config: NotesConfig,
        session: Optional[requests.Session] = None,
        storage=None,
    ):
        self.config = config
        self.session = session if session is not None else requests.Session()
        self._notes = NotesService(config.base_url, self.session)
        self._ownership = OwnershipTracker(
            storage if storage is not None else JSONFileStorage(config.storage_path)
        )
        self._ownership.load()
        LOGGER.debug("PyNotesService ready for %s", config.base_url)

    @property
    def notes(self) -> NotesService:
        return self._notes

    @property
    def ownership(self) -> OwnershipTracker:
        return self._ownership

    def __str__(self) -> str:
        return f"PyNotesService: {self.config.base_url}"

    def __repr__(self) -> str:
        return f"<{self}>"
