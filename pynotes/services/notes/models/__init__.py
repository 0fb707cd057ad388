"""Public exports for Notes service data models."""

from __future__ import annotations

from .note import CreateNoteInput, Healthcheck, Note, UpdateNoteInput

__all__ = [
    "Note",
    "CreateNoteInput",
    "UpdateNoteInput",
    "Healthcheck",
]
