"""
Cycling session.

Remembers which misspelled word on which line is currently selected so
that repeated "open menu" commands step through the words of one line.

State machine:
    EMPTY      --open-->       POPULATED (words scanned for the cursor line)
    POPULATED  --open-->       SELECTED  (proximity pick)
    SELECTED   --open-->       SELECTED  (index + 1, wrapping)
    any        --invalidate--> EMPTY     (edit, line change, expiry)

Every entry into or within SELECTED re-arms a single expiry timer; when it
fires the session is invalidated, so a menu reopened after an idle pause
starts again from the cursor instead of resuming a stale cycle.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from selectspell.core.proximity import closest_index
from selectspell.models import Position, SessionState, WordSpan

if TYPE_CHECKING:
    from selectspell.core.scanner import LineScanner
    from selectspell.scheduling import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

DEFAULT_RESET_DELAY = 1.0  # seconds


class CyclingSession:
    """
    Per-editor cycling state for the "open spelling menu" command.

    All mutation happens under one lock. Expiry callbacks carry the
    generation they were armed in and do nothing if the session has been
    invalidated or re-armed since, so a late timer cannot reset a newer
    cycle.

    Attributes:
        scanner: LineScanner used to (re)compute a line's misspelled words.
        scheduler: Source of the cancellable expiry timer.
        reset_delay: Idle seconds before the session expires.

    Example:
        >>> session = CyclingSession(scanner, ManualScheduler())
        >>> session.open(Position(0, 2), "Helo wrold").word
        'Helo'
        >>> session.open(Position(0, 2), "Helo wrold").word
        'wrold'
    """

    def __init__(
        self,
        scanner: LineScanner,
        scheduler: Scheduler,
        reset_delay: float = DEFAULT_RESET_DELAY,
    ):
        self.scanner = scanner
        self.scheduler = scheduler
        self.reset_delay = reset_delay

        self._lock = threading.RLock()
        self._words: list[WordSpan] = []
        self._selected_index = -1
        self._line_checked = -1
        self._expiry: TimerHandle | None = None
        self._generation = 0

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------

    @property
    def words(self) -> list[WordSpan]:
        return list(self._words)

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def line_checked(self) -> int:
        return self._line_checked

    @property
    def expiry_pending(self) -> bool:
        return self._expiry is not None

    @property
    def state(self) -> SessionState:
        if self._line_checked == -1:
            return SessionState.EMPTY
        if self._selected_index == -1:
            return SessionState.POPULATED
        return SessionState.SELECTED

    @property
    def selected(self) -> WordSpan | None:
        if self._selected_index == -1:
            return None
        return self._words[self._selected_index]

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def invalidate(self) -> None:
        """Discard all cached state and cancel a pending expiry."""
        with self._lock:
            self._generation += 1
            self._cancel_expiry()
            if self._line_checked != -1:
                logger.debug("Cycling session for line %d invalidated", self._line_checked)
            self._words = []
            self._selected_index = -1
            self._line_checked = -1

    def invalidate_if_moved(self, cursor: Position) -> None:
        """Invalidate when the cursor has left the line this session covers."""
        with self._lock:
            if self._line_checked != -1 and self._line_checked != cursor.line:
                self.invalidate()

    def open(self, cursor: Position, line_text: str) -> WordSpan | None:
        """
        Select the next word to present for ``cursor``'s line.

        The first call on a line picks the word closest to the cursor;
        later calls (same line, no edit, no expiry) advance cyclically.

        Args:
            cursor: Current cursor position.
            line_text: Current text of ``cursor.line``.

        Returns:
            The selected word span, or None when the line has no
            misspelled words.
        """
        with self._lock:
            if self._line_checked != cursor.line:
                self.invalidate()
                self._words = self.scanner.scan_line(line_text, cursor.line)
                self._line_checked = cursor.line
                self._selected_index = -1

            if not self._words:
                self.invalidate()
                return None

            if self._selected_index == -1:
                self._selected_index = closest_index(self._words, cursor)
            else:
                self._selected_index = (self._selected_index + 1) % len(self._words)

            self._arm_expiry()
            target = self._words[self._selected_index]
            logger.debug(
                "Line %d: selected %r (%d of %d)",
                cursor.line,
                target.word,
                self._selected_index + 1,
                len(self._words),
            )
            return target

    # -------------------------------------------------------------------------
    # Expiry timer
    # -------------------------------------------------------------------------

    def _cancel_expiry(self) -> None:
        if self._expiry is not None:
            self._expiry.cancel()
            self._expiry = None

    def _arm_expiry(self) -> None:
        self._cancel_expiry()
        self._generation += 1
        generation = self._generation
        self._expiry = self.scheduler.call_later(
            self.reset_delay, lambda: self._expire(generation)
        )

    def _expire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._expiry = None
            logger.debug("Cycling session expired after %.2fs idle", self.reset_delay)
            self.invalidate()
