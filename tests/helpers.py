"""Shared fixtures for the test suite."""

import json
from unittest.mock import MagicMock

import requests

BASE_URL = "http://localhost:4000/v1"

NOTE_DATA = {
    "id": 1,
    "title": "Test Note",
    "body": "Test Body",
    "tags": ["test"],
    "archived": False,
    "updated_at": "2024-01-01T00:00:00Z",
    "version": 1,
}


def make_response(status_code=200, data=None, raw=None):
    """Build a real ``requests.Response`` carrying ``data`` as JSON (or ``raw`` bytes)."""
    resp = requests.Response()
    resp.status_code = status_code
    if raw is not None:
        resp._content = raw
    elif data is not None:
        resp._content = json.dumps(data).encode("utf-8")
    else:
        resp._content = b""
    resp.headers["Content-Type"] = "application/json"
    resp.encoding = "utf-8"
    return resp


def make_session(*responses):
    """A mock session whose ``request`` returns ``responses`` in order."""
    session = MagicMock(spec=requests.Session)
    session.request.side_effect = list(responses)
    return session


def sent_json(session, call_index=0):
    """Decode the JSON body of the ``call_index``-th request."""
    return json.loads(session.request.call_args_list[call_index].kwargs["data"])
