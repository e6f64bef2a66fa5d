"""
Custom dictionary text handling.

The custom dictionary is persisted as one string of newline-separated
words in insertion order. No case folding or sorting is applied.
"""

from __future__ import annotations


def parse_custom_dictionary(text: str) -> list[str]:
    """
    Words from a persisted custom dictionary: trimmed, blanks dropped.

    Example:
        >>> parse_custom_dictionary("foo\\n  bar \\n\\n")
        ['foo', 'bar']
    """
    if not text:
        return []
    return [word.strip() for word in text.split("\n") if word.strip()]


def append_word(text: str, word: str) -> tuple[str, bool]:
    """
    Append ``word`` unless an identical entry already exists.

    Membership is an exact string comparison against the stored entries.

    Returns:
        ``(new_text, added)``; ``new_text`` is ``text`` unchanged when the
        word was already present.

    Example:
        >>> append_word("foo\\nbar", "foo")
        ('foo\\nbar', False)
        >>> append_word("foo\\nbar", "baz")
        ('foo\\nbar\\nbaz', True)
    """
    entries = text.split("\n") if text else []
    if word in entries:
        return text, False
    entries.append(word)
    return "\n".join(entries), True
