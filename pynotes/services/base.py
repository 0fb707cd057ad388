"""Shared service plumbing."""

from __future__ import annotations

from typing import Dict, Optional


class BaseService:
    """Holds the root URL and HTTP session every service is built from."""

    def __init__(self, service_root: str, session, params: Optional[Dict[str, str]] = None):
        self._service_root = service_root.rstrip("/")
        self.session = session
        self.params: Dict[str, str] = dict(params or {})

    @property
    def service_root(self) -> str:
        return self._service_root
