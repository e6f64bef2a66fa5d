"""
Detection, selection and cycling engine.

- tokenize: candidate words on a line
- LineScanner: misspelled words on a line
- closest: proximity pick for a cursor
- CyclingSession: repeated "open menu" stepping through a line's words
- SuggestionApplier: replace a word and reposition the cursor
"""

from selectspell.core.applier import SuggestionApplier, reposition_cursor
from selectspell.core.proximity import closest, closest_index
from selectspell.core.scanner import LineScanner
from selectspell.core.session import CyclingSession
from selectspell.core.tokenizer import Token, tokenize

__all__ = [
    "tokenize",
    "Token",
    "LineScanner",
    "closest",
    "closest_index",
    "CyclingSession",
    "SuggestionApplier",
    "reposition_cursor",
]
