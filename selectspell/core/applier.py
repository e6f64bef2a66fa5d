"""
Suggestion applier.

Replaces a misspelled word with a chosen suggestion and keeps the cursor
where the user expects it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from selectspell.models import Position, WordSpan

if TYPE_CHECKING:
    from selectspell.editor import EditorSurface

logger = logging.getLogger(__name__)


def reposition_cursor(span: WordSpan, suggestion: str, saved_cursor: Position) -> Position:
    """
    Cursor position after ``span`` is replaced by ``suggestion``.

    A cursor on the span's line strictly right of ``span.start`` is shifted
    by the length difference; this includes a cursor inside the word. Any
    other cursor is left where it was.

    Example:
        >>> span = WordSpan.on_line("Helo", 0, 0)
        >>> reposition_cursor(span, "Hello", Position(0, 7))
        Position(line=0, column=8)
        >>> reposition_cursor(span, "Hello", Position(0, 0))
        Position(line=0, column=0)
    """
    if saved_cursor.line == span.start.line and saved_cursor.column > span.start.column:
        delta = len(suggestion) - len(span.word)
        return saved_cursor.with_column(max(saved_cursor.column + delta, 0))
    return saved_cursor


class SuggestionApplier:
    """
    Applies suggestions to an editor.

    Attributes:
        editor: The editor surface receiving the edit.
    """

    def __init__(self, editor: EditorSurface):
        self.editor = editor

    def apply(
        self,
        span: WordSpan,
        suggestion: str,
        saved_cursor: Position | None = None,
    ) -> Position:
        """
        Replace ``span`` with ``suggestion`` and reposition the cursor.

        Args:
            span: The word to replace.
            suggestion: Replacement text.
            saved_cursor: Cursor before the edit; read from the editor when omitted.

        Returns:
            The cursor position set after the edit.
        """
        if saved_cursor is None:
            saved_cursor = self.editor.get_cursor()

        self.editor.replace_range(suggestion, span.start, span.end)
        new_cursor = reposition_cursor(span, suggestion, saved_cursor)
        self.editor.set_cursor(new_cursor)
        logger.debug(
            "Replaced %r with %r on line %d; cursor %d -> %d",
            span.word,
            suggestion,
            span.line,
            saved_cursor.column,
            new_cursor.column,
        )
        return new_cursor
