"""
Line tokenizer.

Extracts candidate words (runs of ASCII letters and apostrophes bounded by
word boundaries) from a single line of text, left to right.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

# =============================================================================
# CONSTANTS
# =============================================================================

MIN_WORD_LENGTH = 2

# ASCII boundaries: "café" yields "caf", "abc1" yields nothing
WORD_EXTRACTION_PATTERN = re.compile(r"\b[a-zA-Z']+\b", re.ASCII)


# =============================================================================
# DATA STRUCTURES
# =============================================================================


@dataclass(frozen=True)
class Token:
    """A candidate word and its half-open column range on the line."""

    text: str
    start: int
    end: int


# =============================================================================
# TOKENIZER
# =============================================================================


def tokenize(line: str, min_length: int = MIN_WORD_LENGTH) -> Iterator[Token]:
    """
    Yield candidate words in ``line`` ordered by starting column.

    Matches are maximal and non-overlapping; candidates shorter than
    ``min_length`` are dropped.

    Args:
        line: A single line of text (no newline handling is done).
        min_length: Minimum candidate length to keep.

    Example:
        >>> [t.text for t in tokenize("I don't kno, a b cd")]
        ["don't", 'kno', 'cd']
    """
    for match in WORD_EXTRACTION_PATTERN.finditer(line):
        word = match.group(0)
        if len(word) < min_length:
            continue
        yield Token(word, match.start(), match.end())
