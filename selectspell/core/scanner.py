"""
Line scanner: tokenizer + dictionary oracle.

Produces the ordered list of misspelled words on one line. The scanner
holds no per-line state; every call rescans the text it is given.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from selectspell.core.tokenizer import MIN_WORD_LENGTH, tokenize
from selectspell.models import WordSpan

if TYPE_CHECKING:
    from selectspell.dictionary.oracle import SpellOracle

logger = logging.getLogger(__name__)


class LineScanner:
    """
    Finds misspelled words on a single line.

    The oracle may be ``None`` until a dictionary has been loaded; in that
    state ``ready`` is False and every scan returns an empty list so callers
    can report "not initialized" without special-casing errors.

    Attributes:
        oracle: Dictionary oracle answering ``correct(word)``; swappable at runtime.
        min_word_length: Tokens shorter than this are never checked.

    Example:
        >>> scanner = LineScanner(oracle)
        >>> [s.word for s in scanner.scan_line("Helo wrold", 0)]
        ['Helo', 'wrold']
    """

    def __init__(
        self,
        oracle: SpellOracle | None = None,
        min_word_length: int = MIN_WORD_LENGTH,
    ):
        self.oracle = oracle
        self.min_word_length = min_word_length

    @property
    def ready(self) -> bool:
        """True once a dictionary oracle is attached."""
        return self.oracle is not None

    def scan_line(self, text: str, line_number: int) -> list[WordSpan]:
        """
        Return the misspelled words on ``text``, sorted by start column.

        Args:
            text: The line's current text.
            line_number: Line index stamped onto the returned spans.

        Returns:
            Misspelled word spans; empty when the line is clean or no
            oracle is loaded.
        """
        if self.oracle is None:
            logger.debug("Scan of line %d skipped: no dictionary loaded", line_number)
            return []

        misspelled = [
            WordSpan.on_line(token.text, line_number, token.start)
            for token in tokenize(text, self.min_word_length)
            if not self.oracle.correct(token.text)
        ]
        misspelled.sort(key=lambda span: span.start.column)
        logger.debug("Line %d: %d misspelled word(s)", line_number, len(misspelled))
        return misspelled
