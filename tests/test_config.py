"""Tests for startup configuration, storage and the client facade."""

import json
import os
import tempfile
import unittest

from pynotes import NotesConfig, PyNotesService
from pynotes.config import BASE_URL_ENV, DEFAULT_STORAGE_PATH, STORAGE_PATH_ENV
from pynotes.exceptions import PyNotesConfigError
from pynotes.storage import JSONFileStorage, MemoryStorage

from .helpers import BASE_URL, NOTE_DATA, make_response, make_session


class NotesConfigTest(unittest.TestCase):
    def test_missing_base_url_fails_fast(self):
        with self.assertRaises(PyNotesConfigError) as ctx:
            NotesConfig.from_env({})
        self.assertIn(BASE_URL_ENV, str(ctx.exception))

    def test_blank_base_url_fails_fast(self):
        with self.assertRaises(PyNotesConfigError):
            NotesConfig.from_env({BASE_URL_ENV: "   "})

    def test_non_string_base_url_rejected(self):
        for value in (123, ["http://localhost"]):
            with self.assertRaises(PyNotesConfigError, msg=repr(value)):
                NotesConfig.from_env({}, base_url=value)

    def test_from_env(self):
        config = NotesConfig.from_env(
            {BASE_URL_ENV: BASE_URL + "/", STORAGE_PATH_ENV: "/tmp/notes.json"}
        )
        self.assertEqual(config.base_url, BASE_URL)
        self.assertEqual(config.storage_path, "/tmp/notes.json")

    def test_default_storage_path(self):
        config = NotesConfig.from_env({BASE_URL_ENV: BASE_URL})
        self.assertEqual(config.storage_path, DEFAULT_STORAGE_PATH)

    def test_explicit_base_url_wins(self):
        config = NotesConfig.from_env(
            {BASE_URL_ENV: "http://env"}, base_url="http://explicit"
        )
        self.assertEqual(config.base_url, "http://explicit")


class JSONFileStorageTest(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, "nested", "storage.json")
        self.storage = JSONFileStorage(self.path)

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_file_is_empty(self):
        self.assertIsNone(self.storage.get_item("noteIds"))

    def test_set_get_remove(self):
        self.storage.set_item("noteIds", "[1]")
        self.storage.set_item("other", "x")
        self.assertEqual(self.storage.get_item("noteIds"), "[1]")

        self.storage.remove_item("noteIds")

        self.assertIsNone(self.storage.get_item("noteIds"))
        with open(self.path, "r", encoding="utf-8") as f:
            self.assertEqual(json.load(f), {"other": "x"})

    def test_corrupt_file_reads_empty(self):
        os.makedirs(os.path.dirname(self.path))
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("{oops")
        self.assertIsNone(self.storage.get_item("noteIds"))
        self.storage.set_item("noteIds", "[]")
        self.assertEqual(self.storage.get_item("noteIds"), "[]")


class PyNotesServiceTest(unittest.TestCase):
    def test_wires_services(self):
        storage = MemoryStorage({"noteIds": "[3]"})
        session = make_session(make_response(200, {"note": NOTE_DATA}))
        api = PyNotesService(NotesConfig(base_url=BASE_URL), session=session, storage=storage)

        self.assertEqual(api.ownership.ids, [3])
        self.assertEqual(api.notes.get(1).title, "Test Note")
        self.assertEqual(session.request.call_args.args[1], f"{BASE_URL}/notes/1")

    def test_blank_config_rejected(self):
        with self.assertRaises(PyNotesConfigError):
            PyNotesService(NotesConfig(base_url=""), storage=MemoryStorage())


if __name__ == "__main__":
    unittest.main()
