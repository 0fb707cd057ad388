"""The pynotes library."""

import logging

from pynotes.base import PyNotesService
from pynotes.config import NotesConfig

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["NotesConfig", "PyNotesService"]
