"""
Low-level HTTP transport for the notes API.

One call, one request: no retries, no caching, no timeout. Every failure is
normalized into a ``NotesError`` whose ``str()`` is fit for display.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from pynotes.exceptions import PyNotesConfigError, PyNotesException

LOGGER = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


# ------------------------------- Errors --------------------------------------


class NotesError(PyNotesException):
    """Base notes transport error."""


class NotesTransportError(NotesError):
    """The request never produced a response (offline, DNS, refused...)."""


class NotesApiError(NotesError):
    """The server answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        payload: Optional[object] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class NoteNotFound(NotesApiError):
    """404 Not Found."""


class NotesDecodeError(NotesError):
    """A success response whose body is not the expected JSON shape."""

    def __init__(self, message: str, payload: Optional[object] = None):
        super().__init__(message)
        self.payload = payload


# ------------------------------- Helpers -------------------------------------


def _status_message(code: int) -> str:
    return f"HTTP error! status: {code}"


def _error_message(body: object, code: int) -> str:
    """Pull a display message out of an error body, or fall back to the status."""
    if not isinstance(body, dict):
        return _status_message(code)
    err = body.get("error")
    if isinstance(err, str) and err:
        return err
    # Validation failures arrive as {"error": {"field": "message"}}
    if isinstance(err, dict) and err:
        return "; ".join(f"{field}: {msg}" for field, msg in err.items())
    return _status_message(code)


# ------------------------------- Transport -----------------------------------


class _NotesHttpClient:
    """
    Minimal JSON transport:
      - ``Content-Type: application/json`` on every request
      - body is pre-serialized JSON text, sent UTF-8 encoded
      - 2xx -> decoded JSON, anything else -> ``NotesApiError``
    """

    def __init__(self, base_url: str, session: requests.Session):
        if not base_url:
            raise PyNotesConfigError("Notes base URL is required")
        self._base_url = base_url.rstrip("/")
        self._session = session
        LOGGER.debug("Initialized _NotesHttpClient with base_url: %s", self._base_url)

    @property
    def base_url(self) -> str:
        return self._base_url

    def _build_url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def request(
        self,
        path: str,
        *,
        method: str = "GET",
        body: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        allow_empty: bool = False,
    ) -> Any:
        url = self._build_url(path)
        merged = {
            k: v for k, v in (headers or {}).items() if k.lower() != "content-type"
        }
        merged["Content-Type"] = JSON_CONTENT_TYPE

        # http.client would encode str bodies as latin-1
        raw_body = body.encode("utf-8") if isinstance(body, str) else body

        LOGGER.info("%s %s", method, url)
        try:
            resp = self._session.request(method, url, data=raw_body, headers=merged)
        except requests.RequestException as exc:
            LOGGER.error("%s %s failed before a response: %s", method, url, exc)
            raise NotesTransportError(f"Network error: {exc}") from exc

        code = resp.status_code
        LOGGER.debug("%s %s returned status %d", method, url, code)

        if not 200 <= code < 300:
            try:
                payload = resp.json()
            except ValueError:
                payload = None
            message = _error_message(payload, code)
            LOGGER.error("%s %s failed with code %d: %s", method, url, code, message)
            if code == 404:
                raise NoteNotFound(message, status_code=code, payload=payload)
            raise NotesApiError(message, status_code=code, payload=payload)

        if allow_empty and not resp.content:
            return None
        try:
            data = resp.json()
        except ValueError as exc:
            LOGGER.error("Failed to parse JSON response from %s", url)
            raise NotesDecodeError(
                "Invalid JSON response", payload=getattr(resp, "text", None)
            ) from exc
        LOGGER.debug("Successfully parsed JSON response from %s", url)
        return data
