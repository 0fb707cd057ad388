"""Wire models for the notes API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field

from ._base import NotesModel


class Note(NotesModel):
    """A note as stored by the server."""

    model_config = NotesModel.model_config | ConfigDict(frozen=True)

    id: int
    title: str
    body: str
    tags: List[str] = Field(default_factory=list)
    archived: bool = False
    updated_at: str
    version: int


class CreateNoteInput(NotesModel):
    """Payload for ``POST /notes``; id, timestamps and version are server-assigned."""

    title: str
    body: str
    tags: List[str]

    def to_json(self) -> str:
        return self.model_dump_json()


class UpdateNoteInput(NotesModel):
    """
    Payload for ``PUT /notes/{id}``.

    ``archived=None`` means "leave the server value alone" and is dropped
    from the wire body; ``False`` is sent as ``false``.
    """

    title: str
    body: str
    tags: List[str]
    archived: Optional[bool] = None

    @classmethod
    def from_note(cls, note: Note, **changes: Any) -> "UpdateNoteInput":
        """Start from the note's current values and apply ``changes``."""
        values: Dict[str, Any] = {
            "title": note.title,
            "body": note.body,
            "tags": list(note.tags),
            "archived": note.archived,
        }
        values.update(changes)
        return cls(**values)

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)


class Healthcheck(NotesModel):
    status: str
    system_info: Dict[str, str] = Field(default_factory=dict)
