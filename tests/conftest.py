"""
Pytest configuration and fixtures for SelectSpell tests.
"""

from pathlib import Path

import pytest

from selectspell.scheduling import ManualScheduler


class FakeOracle:
    """Deterministic SpellOracle: a fixed word set and canned suggestions."""

    def __init__(self, words=(), suggestions=None):
        self.words = {w.lower() for w in words}
        self.suggestions = dict(suggestions or {})
        self.added = []

    def correct(self, word):
        return word.lower() in self.words

    def suggest(self, word):
        return list(self.suggestions.get(word, []))

    def add(self, word):
        self.words.add(word.lower())
        self.added.append(word)


@pytest.fixture
def make_oracle():
    """Factory for FakeOracle instances."""
    return FakeOracle


@pytest.fixture
def oracle():
    """Oracle that knows a handful of words and corrects the usual typos."""
    return FakeOracle(
        words=["hello", "world", "the", "cat", "sat", "on", "mat", "don't"],
        suggestions={
            "Helo": ["Hello", "Help", "Hell"],
            "wrold": ["world", "would"],
            "teh": ["the", "ten"],
            "Thhe": ["The"],
            "caat": ["cat", "coat"],
        },
    )


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Manual clock for expiry timers."""
    return ManualScheduler()


@pytest.fixture
def hunspell_dir(tmp_path) -> Path:
    """A minimal Hunspell dictionary pair on disk."""
    (tmp_path / "index.aff").write_text("SET UTF-8\nTRY esianrtolcdugmphbyfvkwz\n", encoding="utf-8")
    (tmp_path / "index.dic").write_text(
        "5\nhello/MS\nworld/S\nthe\ncat/S\ncafé\n", encoding="utf-8"
    )
    return tmp_path
