"""
Data models for SelectSpell.

Positions and word spans are the currency passed between the tokenizer,
scanner, proximity selector, cycling session and suggestion applier.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True, order=True)
class Position:
    """A cursor or span boundary inside the editor (0-based line and column)."""

    line: int
    column: int

    def __post_init__(self) -> None:
        if self.line < 0 or self.column < 0:
            raise ValueError(f"Position must be non-negative, got ({self.line}, {self.column})")

    def with_column(self, column: int) -> Position:
        return Position(self.line, column)


@dataclass(frozen=True)
class WordSpan:
    """
    A word on a single line with its half-open column range.

    Spans never cross lines and always cover exactly ``word``:
    ``end.column == start.column + len(word)``.

    Example:
        >>> span = WordSpan.on_line("wrold", line=0, column=5)
        >>> (span.start.column, span.end.column)
        (5, 10)
    """

    word: str
    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.start.line != self.end.line:
            raise ValueError("WordSpan must not cross lines")
        if self.start.column >= self.end.column:
            raise ValueError(
                f"WordSpan must be non-empty, got [{self.start.column}, {self.end.column})"
            )
        if self.end.column - self.start.column != len(self.word):
            raise ValueError(
                f"WordSpan width {self.end.column - self.start.column} "
                f"does not match word {self.word!r}"
            )

    @classmethod
    def on_line(cls, word: str, line: int, column: int) -> WordSpan:
        """Build a span for ``word`` starting at ``column`` on ``line``."""
        return cls(word, Position(line, column), Position(line, column + len(word)))

    @property
    def line(self) -> int:
        return self.start.line

    def same_range(self, other: WordSpan) -> bool:
        """True when both spans cover the same columns."""
        return self.start.column == other.start.column and self.end.column == other.end.column

    def middle(self) -> Position:
        """Position of the word's middle character (used for menu placement)."""
        return self.start.with_column(self.start.column + len(self.word) // 2)


class SessionState(Enum):
    """States of the cycling session."""

    EMPTY = "empty"  # no active line
    POPULATED = "populated"  # words computed, nothing selected yet
    SELECTED = "selected"  # a specific index chosen


@dataclass
class Settings:
    """
    Persisted user settings.

    ``custom_dictionary`` is a newline-separated list of user-accepted words.
    Keys this version does not know are kept in ``extra`` so a save never
    drops them.
    """

    custom_dictionary: str = ""
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {**self.extra, "customDictionary": self.custom_dictionary}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create from a loaded JSON object, falling back to defaults."""
        extra = {k: v for k, v in data.items() if k != "customDictionary"}
        custom = data.get("customDictionary") or ""
        if not isinstance(custom, str):
            custom = ""
        return cls(custom_dictionary=custom, extra=extra)
