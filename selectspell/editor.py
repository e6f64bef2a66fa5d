"""
Editor surface used by the assistant, plus an in-memory implementation.

Host editors adapt their own API to ``EditorSurface``. ``TextBuffer`` is a
plain-Python buffer with the same operations and change notification; it
backs the tests and any host that keeps text in Python.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from selectspell.models import Position

logger = logging.getLogger(__name__)

ChangeListener = Callable[["TextBuffer"], None]


class EditorSurface(Protocol):
    """Operations the assistant needs from the host editor."""

    def get_line(self, line: int) -> str: ...

    def line_count(self) -> int: ...

    def get_cursor(self) -> Position: ...

    def set_cursor(self, position: Position) -> None: ...

    def replace_range(self, text: str, start: Position, end: Position) -> None: ...

    def pos_to_offset(self, position: Position) -> int: ...


class TextBuffer:
    """
    In-memory multi-line text with a cursor.

    Every ``replace_range`` and ``set_text`` notifies subscribed change
    listeners after the edit, mirroring an editor's "change" event.
    Cursor moves are reported to cursor listeners.

    Example:
        >>> buf = TextBuffer("Helo wrold")
        >>> buf.replace_range("Hello", Position(0, 0), Position(0, 4))
        >>> buf.text
        'Hello wrold'
    """

    def __init__(self, text: str = "", cursor: Position | None = None):
        self._lines = text.split("\n")
        self._cursor = Position(0, 0)
        self._change_listeners: list[ChangeListener] = []
        self._cursor_listeners: list[Callable[[Position], None]] = []
        if cursor is not None:
            self._cursor = self._clamp(cursor)

    # -------------------------------------------------------------------------
    # Listeners
    # -------------------------------------------------------------------------

    def on_change(self, listener: ChangeListener) -> Callable[[], None]:
        """Subscribe to edits. Returns a function that unsubscribes."""
        self._change_listeners.append(listener)
        return lambda: self._change_listeners.remove(listener)

    def on_cursor_move(self, listener: Callable[[Position], None]) -> Callable[[], None]:
        """Subscribe to cursor moves. Returns a function that unsubscribes."""
        self._cursor_listeners.append(listener)
        return lambda: self._cursor_listeners.remove(listener)

    def _emit_change(self) -> None:
        for listener in list(self._change_listeners):
            listener(self)

    # -------------------------------------------------------------------------
    # EditorSurface
    # -------------------------------------------------------------------------

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def set_text(self, text: str) -> None:
        self._lines = text.split("\n")
        self._cursor = self._clamp(self._cursor)
        self._emit_change()

    def get_line(self, line: int) -> str:
        if not 0 <= line < len(self._lines):
            raise IndexError(f"line {line} out of range (0..{len(self._lines) - 1})")
        return self._lines[line]

    def line_count(self) -> int:
        return len(self._lines)

    def get_cursor(self) -> Position:
        return self._cursor

    def set_cursor(self, position: Position) -> None:
        self._cursor = self._clamp(position)
        for listener in list(self._cursor_listeners):
            listener(self._cursor)

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        """Replace the half-open range ``[start, end)`` with ``text``."""
        if end < start:
            start, end = end, start
        start = self._clamp(start)
        end = self._clamp(end)

        head = self._lines[start.line][: start.column]
        tail = self._lines[end.line][end.column :]
        replacement = (head + text + tail).split("\n")
        self._lines[start.line : end.line + 1] = replacement
        logger.debug("Replaced %s..%s with %r", start, end, text)
        self._emit_change()

    def pos_to_offset(self, position: Position) -> int:
        position = self._clamp(position)
        offset = sum(len(line) + 1 for line in self._lines[: position.line])
        return offset + position.column

    def _clamp(self, position: Position) -> Position:
        line = min(position.line, len(self._lines) - 1)
        column = min(position.column, len(self._lines[line]))
        return Position(line, column)
