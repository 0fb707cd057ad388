"""
Startup configuration for the notes client.

The base endpoint is resolved once, when the process starts, and is then
passed explicitly to everything that needs it.

  PYNOTES_API_BASE_URL   required, e.g. http://localhost:4000/v1
  PYNOTES_STORAGE_PATH   optional, file backing the client-local store
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from pynotes.exceptions import PyNotesConfigError

BASE_URL_ENV = "PYNOTES_API_BASE_URL"
STORAGE_PATH_ENV = "PYNOTES_STORAGE_PATH"

CONFIG_DIR = os.path.expanduser("~/.config/pynotes")
DEFAULT_STORAGE_PATH = os.path.join(CONFIG_DIR, "storage.json")


@dataclass(frozen=True)
class NotesConfig:
    base_url: str
    storage_path: str = DEFAULT_STORAGE_PATH

    def __post_init__(self) -> None:
        if self.base_url is not None and not isinstance(self.base_url, str):
            raise PyNotesConfigError(
                f"{BASE_URL_ENV} must be a URL string, got {self.base_url!r}"
            )
        url = (self.base_url or "").strip()
        if not url:
            raise PyNotesConfigError(f"{BASE_URL_ENV} environment variable is required")
        # frozen: bypass __setattr__ to store the normalized value
        object.__setattr__(self, "base_url", url.rstrip("/"))

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        base_url: Optional[str] = None,
    ) -> "NotesConfig":
        """Build the configuration from the environment.

        An explicit ``base_url`` wins over the environment. Raises
        ``PyNotesConfigError`` when neither provides one.
        """
        env = os.environ if environ is None else environ
        resolved = base_url or env.get(BASE_URL_ENV, "")
        storage_path = env.get(STORAGE_PATH_ENV) or DEFAULT_STORAGE_PATH
        return cls(base_url=resolved, storage_path=os.path.expanduser(storage_path))
