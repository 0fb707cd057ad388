"""Public API for the Notes service."""

from .client import (
    NoteNotFound,
    NotesApiError,
    NotesDecodeError,
    NotesError,
    NotesTransportError,
)
from .models import CreateNoteInput, Healthcheck, Note, UpdateNoteInput
from .ownership import OwnershipTracker
from .service import NotesService

__all__ = [
    "NotesService",
    "OwnershipTracker",
    "Note",
    "CreateNoteInput",
    "UpdateNoteInput",
    "Healthcheck",
    "NotesError",
    "NotesApiError",
    "NoteNotFound",
    "NotesDecodeError",
    "NotesTransportError",
]
