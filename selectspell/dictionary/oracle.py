"""
Dictionary oracle backed by pyspellchecker.

The rest of the package only talks to the ``SpellOracle`` protocol
(``correct``, ``suggest``, ``add``); any engine exposing those three
operations can be dropped in without touching the core.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from spellchecker import SpellChecker

logger = logging.getLogger(__name__)


# =============================================================================
# PROTOCOL
# =============================================================================


class SpellOracle(Protocol):
    """Opaque correctness and suggestion engine."""

    def correct(self, word: str) -> bool: ...

    def suggest(self, word: str) -> list[str]: ...

    def add(self, word: str) -> None: ...


# =============================================================================
# CASE HANDLING
# =============================================================================


def match_case(template: str, word: str) -> str:
    """
    Re-apply ``template``'s casing pattern to ``word``.

    ALL-CAPS templates give ALL-CAPS results and Capitalized templates give
    Capitalized results; anything else leaves ``word`` untouched.

    Example:
        >>> match_case("Helo", "hello")
        'Hello'
        >>> match_case("HELO", "hello")
        'HELLO'
    """
    letters = [c for c in template if c.isalpha()]
    if len(letters) > 1 and all(c.isupper() for c in letters):
        return word.upper()
    if template[:1].isupper():
        return word[:1].upper() + word[1:]
    return word


# =============================================================================
# PYSPELLCHECKER ORACLE
# =============================================================================


class PySpellOracle:
    """
    ``SpellOracle`` implementation on top of ``spellchecker.SpellChecker``.

    Suggestions are ranked by corpus frequency (most frequent first), ties
    broken alphabetically, and re-cased to match the misspelled word.

    Attributes:
        spell: The underlying SpellChecker.
        case_sensitive: Whether the SpellChecker was built case-sensitive.

    Example:
        >>> oracle = PySpellOracle.for_language("en")
        >>> oracle.correct("hello")
        True
        >>> oracle.suggest("Helo")[0]
        'Hello'
    """

    def __init__(self, spell: SpellChecker, case_sensitive: bool = False):
        self.spell = spell
        self.case_sensitive = case_sensitive

    @classmethod
    def for_language(
        cls,
        language: str | None = "en",
        distance: int = 2,
        case_sensitive: bool = False,
    ) -> PySpellOracle:
        """Create an oracle from one of pyspellchecker's bundled dictionaries."""
        from spellchecker import SpellChecker

        spell = SpellChecker(language=language, distance=distance, case_sensitive=case_sensitive)
        logger.info("Initialized spellchecker for language %r", language)
        return cls(spell, case_sensitive=case_sensitive)

    @classmethod
    def from_words(
        cls,
        words: Iterable[str],
        distance: int = 2,
        case_sensitive: bool = False,
    ) -> PySpellOracle:
        """Create an oracle whose dictionary is exactly ``words``."""
        from spellchecker import SpellChecker

        spell = SpellChecker(language=None, distance=distance, case_sensitive=case_sensitive)
        word_list = [w for w in words if w]
        spell.word_frequency.load_words(word_list)
        logger.info("Initialized spellchecker with %d words", len(word_list))
        return cls(spell, case_sensitive=case_sensitive)

    def correct(self, word: str) -> bool:
        """
        True if ``word`` is in the dictionary.

        Words wrapped in apostrophes and possessives (``word's``) are
        accepted when their bare form is known.
        """
        if word in self.spell:
            return True
        bare = word.strip("'")
        if bare and bare != word and bare in self.spell:
            return True
        if bare.endswith("'s") and bare[:-2] in self.spell:
            return True
        return False

    def suggest(self, word: str) -> list[str]:
        """Ranked suggestions for ``word``, best first; empty if none."""
        candidates = self.spell.candidates(word) or set()
        lowered = word if self.case_sensitive else word.lower()
        ranked = sorted(
            (c for c in candidates if c != lowered),
            key=lambda c: (-self.spell.word_usage_frequency(c), c),
        )

        suggestions: list[str] = []
        seen: set[str] = set()
        for candidate in ranked:
            cased = match_case(word, candidate)
            if cased not in seen:
                seen.add(cased)
                suggestions.append(cased)
        return suggestions

    def add(self, word: str) -> None:
        """Accept ``word`` for the rest of this session."""
        self.spell.word_frequency.add(word)
        logger.debug("Added %r to live dictionary", word)

    def add_all(self, words: Iterable[str]) -> int:
        """Accept every word in ``words``; returns how many were added."""
        count = 0
        for word in words:
            self.add(word)
            count += 1
        return count
