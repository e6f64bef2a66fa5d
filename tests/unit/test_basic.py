"""
Basic tests for SelectSpell package structure.

These tests verify the public API is importable and
basic configuration works correctly.
"""

from pathlib import Path

import pytest


class TestImports:
    """Test that the public API is importable."""

    def test_import_package(self):
        """Can import the main package."""
        import selectspell

        assert selectspell.__version__ == "0.1.0"

    def test_import_assistant(self):
        """Can import the command layer."""
        from selectspell import SpellAssistant

        assert callable(SpellAssistant.from_config)

    def test_import_core(self):
        """Can import the core engine."""
        from selectspell import CyclingSession, LineScanner, closest, tokenize

        assert callable(tokenize)
        assert callable(closest)
        assert LineScanner().ready is False
        assert CyclingSession is not None

    def test_import_exceptions(self):
        """Can import exception classes."""
        from selectspell import (
            DictionaryLoadError,
            DictionaryNotFoundError,
            NotInitializedError,
            SelectSpellError,
            SettingsError,
        )

        # Verify inheritance
        assert issubclass(DictionaryNotFoundError, SelectSpellError)
        assert issubclass(DictionaryLoadError, SelectSpellError)
        assert issubclass(NotInitializedError, SelectSpellError)
        assert issubclass(SettingsError, SelectSpellError)


class TestSpellCheckConfig:
    """Test SpellCheckConfig behavior."""

    def test_default_config(self):
        """Default config has expected values."""
        from selectspell import SpellCheckConfig

        config = SpellCheckConfig()

        assert config.cycle_reset_delay == 1.0
        assert config.max_suggestions == 10
        assert config.min_word_length == 2
        assert config.language == "en"
        assert config.dictionary_dir is None
        assert config.aff_path is None

    def test_dictionary_paths(self):
        """Hunspell file paths are derived from dictionary_dir."""
        from selectspell import SpellCheckConfig

        config = SpellCheckConfig(dictionary_dir="dicts")

        assert config.aff_path == Path("dicts") / "index.aff"
        assert config.dic_path == Path("dicts") / "index.dic"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"cycle_reset_delay": 0},
            {"max_suggestions": 0},
            {"min_word_length": 0},
            {"distance": 3},
            {"language": None},
        ],
    )
    def test_invalid_values_rejected(self, kwargs):
        """Invalid values raise ValueError."""
        from selectspell import SpellCheckConfig

        with pytest.raises(ValueError):
            SpellCheckConfig(**kwargs)


class TestModels:
    """Test Position and WordSpan invariants."""

    def test_span_on_line(self):
        from selectspell import WordSpan

        span = WordSpan.on_line("wrold", line=3, column=5)

        assert span.start.column == 5
        assert span.end.column == 10
        assert span.line == 3

    def test_span_must_match_word_length(self):
        from selectspell import Position, WordSpan

        with pytest.raises(ValueError):
            WordSpan("abc", Position(0, 0), Position(0, 5))

    def test_span_cannot_cross_lines(self):
        from selectspell import Position, WordSpan

        with pytest.raises(ValueError):
            WordSpan("ab", Position(0, 0), Position(1, 2))

    def test_negative_position_rejected(self):
        from selectspell import Position

        with pytest.raises(ValueError):
            Position(0, -1)

    def test_middle(self):
        from selectspell import Position, WordSpan

        assert WordSpan.on_line("Helo", 0, 0).middle() == Position(0, 2)
        assert WordSpan.on_line("wrold", 0, 5).middle() == Position(0, 7)
