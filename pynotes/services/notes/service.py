"""
High-level Notes service.

Public API:
  - NotesService.create(note_input) -> Note
  - NotesService.get(note_id) -> Note
  - NotesService.update(note_id, note_input) -> Note
  - NotesService.delete(note_id) -> None
  - NotesService.set_archived(note, archived) -> Note
  - NotesService.healthcheck() -> Healthcheck

Every note-bearing response is an envelope ``{"note": {...}}``; the service
unwraps it and returns a typed model.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from pynotes.services.base import BaseService

from .client import NotesDecodeError, _NotesHttpClient
from .models import CreateNoteInput, Healthcheck, Note, UpdateNoteInput

LOGGER = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _unwrap(data: Any, field: Optional[str], model: Type[M]) -> M:
    """Validate ``data[field]`` (or ``data`` itself when ``field`` is None) as ``model``."""
    if field is not None:
        if not isinstance(data, dict) or field not in data:
            LOGGER.error("Response is missing the %r envelope", field)
            raise NotesDecodeError(f"Response is missing '{field}'", payload=data)
        data = data[field]
    try:
        return model.model_validate(data)
    except ValidationError as e:
        LOGGER.error("%s response validation failed: %s", model.__name__, e)
        raise NotesDecodeError(
            f"{model.__name__} response validation failed", payload=data
        ) from e


class NotesService(BaseService):
    """Typed note operations over the JSON transport."""

    def __init__(self, service_root: str, session, params: Optional[Dict[str, str]] = None):
        super().__init__(service_root=service_root, session=session, params=params)
        self._http = _NotesHttpClient(self.service_root, session)

    @staticmethod
    def _note_path(note_id: int) -> str:
        return f"/notes/{int(note_id)}"

    def create(self, note_input: CreateNoteInput) -> Note:
        """Create a note and return it as stored by the server."""
        data = self._http.request("/notes", method="POST", body=note_input.to_json())
        note = _unwrap(data, "note", Note)
        LOGGER.info("Created note %d", note.id)
        return note

    def get(self, note_id: int) -> Note:
        data = self._http.request(self._note_path(note_id))
        return _unwrap(data, "note", Note)

    def update(self, note_id: int, note_input: UpdateNoteInput) -> Note:
        """
        Replace title, body and tags of ``note_id``.

        ``note_input.archived`` is only sent when set; leaving it as ``None``
        keeps whatever the server currently has.
        """
        data = self._http.request(
            self._note_path(note_id), method="PUT", body=note_input.to_json()
        )
        note = _unwrap(data, "note", Note)
        LOGGER.info("Updated note %d to version %d", note.id, note.version)
        return note

    def delete(self, note_id: int) -> None:
        # The confirmation body ({"message": ...}) carries nothing we need.
        self._http.request(self._note_path(note_id), method="DELETE", allow_empty=True)
        LOGGER.info("Deleted note %d", int(note_id))

    def set_archived(self, note: Note, archived: bool = True) -> Note:
        """Flip the archived flag, resending the note's current content."""
        return self.update(note.id, UpdateNoteInput.from_note(note, archived=archived))

    def healthcheck(self) -> Healthcheck:
        return _unwrap(self._http.request("/healthcheck"), None, Healthcheck)
