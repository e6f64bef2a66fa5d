"""
Proximity selector.

Maps a cursor position to one of the misspelled words on its line. The
tie-break order is fixed because it decides which word "accept top
suggestion" and the first "open menu" act on:

1. A word whose range contains the cursor, inclusive on both ends
   (the column just past the last letter counts as inside).
2. Otherwise the nearest word entirely left of the cursor.
3. Otherwise the nearest word entirely right of the cursor.
4. Otherwise the first word.
"""

from __future__ import annotations

from collections.abc import Sequence

from selectspell.models import Position, WordSpan


def closest_index(words: Sequence[WordSpan], cursor: Position) -> int:
    """
    Index of the word closest to ``cursor``, or -1 for an empty list.

    Only columns are compared; ``words`` are assumed to lie on the
    cursor's line.
    """
    if not words:
        return -1

    col = cursor.column

    for i, word in enumerate(words):
        if word.start.column <= col <= word.end.column:
            return i

    left_index = -1
    left_distance = None
    for i, word in enumerate(words):
        if word.end.column <= col:
            distance = col - word.end.column
            if left_distance is None or distance < left_distance:
                left_distance = distance
                left_index = i

    if left_index != -1:
        return left_index

    right_index = -1
    right_distance = None
    for i, word in enumerate(words):
        if word.start.column > col:
            distance = word.start.column - col
            if right_distance is None or distance < right_distance:
                right_distance = distance
                right_index = i

    if right_index != -1:
        return right_index

    return 0


def closest(words: Sequence[WordSpan], cursor: Position) -> WordSpan | None:
    """
    Pick the misspelled word closest to ``cursor``.

    Returns:
        The chosen span, or None only when ``words`` is empty.

    Example:
        >>> words = [WordSpan.on_line("Helo", 0, 0), WordSpan.on_line("wrold", 0, 5)]
        >>> closest(words, Position(0, 2)).word
        'Helo'
    """
    index = closest_index(words, cursor)
    if index == -1:
        return None
    return words[index]
