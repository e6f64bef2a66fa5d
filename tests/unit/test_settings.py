"""
Tests for settings persistence.
"""

import json

import pytest

from selectspell.exceptions import SettingsError
from selectspell.models import Settings
from selectspell.settings import JsonSettingsStore, MemorySettingsStore


class TestJsonSettingsStore:
    """Tests for JsonSettingsStore."""

    def test_missing_file_gives_defaults(self, tmp_path):
        store = JsonSettingsStore(tmp_path / "data.json")

        assert store.load() == Settings()

    def test_round_trip(self, tmp_path):
        store = JsonSettingsStore(tmp_path / "nested" / "data.json")

        store.save(Settings(custom_dictionary="foo\nbar"))

        assert store.load().custom_dictionary == "foo\nbar"
        data = json.loads((tmp_path / "nested" / "data.json").read_text(encoding="utf-8"))
        assert data == {"customDictionary": "foo\nbar"}

    def test_unknown_keys_preserved(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps({"customDictionary": "foo", "theme": "dark"}))
        store = JsonSettingsStore(path)

        settings = store.load()
        settings.custom_dictionary = "foo\nbar"
        store.save(settings)

        assert json.loads(path.read_text()) == {"theme": "dark", "customDictionary": "foo\nbar"}

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"customDictionary": 5}'])
    def test_bad_content_gives_defaults(self, tmp_path, content):
        path = tmp_path / "data.json"
        path.write_text(content)

        assert JsonSettingsStore(path).load().custom_dictionary == ""

    def test_save_failure_raises(self, tmp_path):
        store = JsonSettingsStore(tmp_path)  # a directory cannot be opened for writing

        with pytest.raises(SettingsError):
            store.save(Settings(custom_dictionary="foo"))


class TestMemorySettingsStore:
    """Tests for MemorySettingsStore."""

    def test_round_trip_is_a_copy(self):
        store = MemorySettingsStore()
        settings = Settings(custom_dictionary="foo")

        store.save(settings)
        settings.custom_dictionary = "changed"

        assert store.load().custom_dictionary == "foo"
