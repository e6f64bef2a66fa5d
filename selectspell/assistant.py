"""
Spell assistant: the command layer bound to one editor.

Wires the core (scanner, proximity selector, cycling session, applier)
to the host's collaborators (dictionary, settings store, menu presenter,
notifier) and exposes the user-facing commands:

- accept_top_suggestion: replace the word nearest the cursor with its best
  suggestion
- open_spelling_menu: show suggestions for the nearest word; repeating the
  command within the reset delay cycles through the line's other words
- add_to_dictionary: accept a word now and persist it
- update_custom_dictionary: replace the custom word list and reload

Commands never raise into the host. Missing dictionaries, empty lines and
failed saves are logged and, where the user should know, reported through
the notifier.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from selectspell.config import SpellCheckConfig
from selectspell.core.applier import SuggestionApplier
from selectspell.core.proximity import closest
from selectspell.core.scanner import LineScanner
from selectspell.core.session import CyclingSession
from selectspell.dictionary.custom import append_word
from selectspell.dictionary.loader import load_oracle
from selectspell.exceptions import (
    DictionaryLoadError,
    DictionaryNotFoundError,
    NotInitializedError,
    SettingsError,
)
from selectspell.menu import MenuItem, RecordingPresenter, SpellingMenu
from selectspell.models import Position, Settings, WordSpan
from selectspell.scheduling import ThreadingScheduler
from selectspell.settings import JsonSettingsStore, MemorySettingsStore

if TYPE_CHECKING:
    from selectspell.dictionary.oracle import SpellOracle
    from selectspell.editor import EditorSurface
    from selectspell.menu import MenuPresenter
    from selectspell.scheduling import Scheduler
    from selectspell.settings import SettingsStore

logger = logging.getLogger(__name__)

NOT_INITIALIZED_MESSAGE = "Spell checker not initialized"
DICTIONARY_MISSING_MESSAGE = (
    "Dictionary files not found. Please add {aff} and {dic} to the dictionary folder."
)


# =============================================================================
# NOTIFICATIONS
# =============================================================================


class Notifier(Protocol):
    def notify(self, message: str) -> None: ...


class LoggingNotifier:
    """
    Reports user notices through the logging system.

    The most recent ``history`` notices are kept in ``messages``.
    """

    def __init__(self, log: logging.Logger | None = None, history: int = 50):
        self.log = log or logger
        self.messages: deque[str] = deque(maxlen=history)

    def notify(self, message: str) -> None:
        self.messages.append(message)
        self.log.info("Notice: %s", message)


# =============================================================================
# ASSISTANT
# =============================================================================


class SpellAssistant:
    """
    Spell-check commands for a single editor.

    Each assistant owns its own CyclingSession, so several editor views can
    cycle independently.

    Attributes:
        editor: The editor surface commands operate on.
        config: SpellCheckConfig in effect.
        scanner: LineScanner holding the current oracle (None until loaded).
        session: CyclingSession for "open spelling menu".
        applier: SuggestionApplier writing into ``editor``.
        settings: Settings as last loaded or saved.

    Example:
        >>> buffer = TextBuffer("Helo wrold", cursor=Position(0, 2))
        >>> assistant = SpellAssistant.from_config(buffer, SpellCheckConfig())
        >>> _ = assistant.accept_top_suggestion()
        >>> buffer.text
        'Hello wrold'
    """

    def __init__(
        self,
        editor: EditorSurface,
        oracle: SpellOracle | None = None,
        config: SpellCheckConfig | None = None,
        settings_store: SettingsStore | None = None,
        scheduler: Scheduler | None = None,
        presenter: MenuPresenter | None = None,
        notifier: Notifier | None = None,
    ):
        self.editor = editor
        self.config = config or SpellCheckConfig()
        self.settings_store = settings_store or MemorySettingsStore()
        self.presenter = presenter or RecordingPresenter()
        self.notifier = notifier or LoggingNotifier()

        self.scanner = LineScanner(oracle, min_word_length=self.config.min_word_length)
        self.session = CyclingSession(
            self.scanner,
            scheduler or ThreadingScheduler(),
            reset_delay=self.config.cycle_reset_delay,
        )
        self.applier = SuggestionApplier(editor)
        self.settings = Settings()
        self.current_menu: SpellingMenu | None = None
        self._unsubscribe: list[Callable[[], None]] = []

    @classmethod
    def from_config(
        cls,
        editor: EditorSurface,
        config: SpellCheckConfig,
        **collaborators,
    ) -> SpellAssistant:
        """
        Create an assistant, load settings and dictionary, and attach listeners.

        A JsonSettingsStore is used when ``config.settings_path`` is set and no
        store is passed explicitly.
        """
        if "settings_store" not in collaborators and config.settings_path is not None:
            collaborators["settings_store"] = JsonSettingsStore(config.settings_path)

        assistant = cls(editor, config=config, **collaborators)
        assistant.load_settings()
        assistant.load_dictionary()
        assistant.attach()
        return assistant

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    @property
    def oracle(self) -> SpellOracle | None:
        return self.scanner.oracle

    @oracle.setter
    def oracle(self, oracle: SpellOracle | None) -> None:
        self.scanner.oracle = oracle
        self.session.invalidate()

    def load_settings(self) -> Settings:
        self.settings = self.settings_store.load()
        return self.settings

    def save_settings(self) -> None:
        self.settings_store.save(self.settings)

    def load_dictionary(self) -> bool:
        """
        (Re)build the oracle from config and the custom dictionary.

        Returns:
            True if a dictionary is loaded. On failure the previous oracle is
            kept and the user is notified.
        """
        try:
            self.oracle = load_oracle(self.config, self.settings.custom_dictionary)
        except DictionaryNotFoundError as e:
            logger.warning("%s", e)
            self.notifier.notify(
                DICTIONARY_MISSING_MESSAGE.format(
                    aff=self.config.aff_filename, dic=self.config.dic_filename
                )
            )
            return False
        except DictionaryLoadError as e:
            logger.error("Failed to load dictionary: %s", e)
            self.notifier.notify(f"Failed to load dictionary: {e}")
            return False
        return True

    def attach(self) -> None:
        """Subscribe to the editor's change and cursor events when it offers them."""
        on_change = getattr(self.editor, "on_change", None)
        if callable(on_change):
            self._unsubscribe.append(on_change(lambda _editor: self.handle_editor_change()))
        on_cursor_move = getattr(self.editor, "on_cursor_move", None)
        if callable(on_cursor_move):
            self._unsubscribe.append(on_cursor_move(self.handle_cursor_move))

    def close(self) -> None:
        """Detach listeners, cancel the expiry timer and hide any open menu."""
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe.clear()
        self._hide_menu()
        self.session.invalidate()

    # -------------------------------------------------------------------------
    # Editor events
    # -------------------------------------------------------------------------

    def handle_editor_change(self) -> None:
        """Any document edit ends the current cycle."""
        self.session.invalidate()

    def handle_cursor_move(self, cursor: Position) -> None:
        """Moving to another line ends the current cycle."""
        self.session.invalidate_if_moved(cursor)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def suggestions_for(self, word: str) -> list[str]:
        if self.oracle is None:
            return []
        return self.oracle.suggest(word)

    def accept_top_suggestion(self) -> Position | None:
        """
        Replace the misspelled word closest to the cursor with its best suggestion.

        Returns:
            The new cursor position, or None when nothing was changed.
        """
        try:
            self._require_oracle()
        except NotInitializedError:
            self._report_not_initialized()
            return None

        cursor = self.editor.get_cursor()
        words = self.scanner.scan_line(self.editor.get_line(cursor.line), cursor.line)
        target = closest(words, cursor)
        if target is None:
            return None

        suggestions = self.suggestions_for(target.word)
        if not suggestions:
            logger.debug("No suggestions for %r", target.word)
            return None

        return self.applier.apply(target, suggestions[0], self.editor.get_cursor())

    def open_spelling_menu(self) -> SpellingMenu | None:
        """
        Show suggestions for the next word in the cycle.

        Returns:
            The menu handed to the presenter, or None when there is no word
            or no suggestion to show.
        """
        try:
            self._require_oracle()
        except NotInitializedError:
            self._report_not_initialized()
            return None

        cursor = self.editor.get_cursor()
        target = self.session.open(cursor, self.editor.get_line(cursor.line))
        if target is None:
            return None
        return self.show_menu(target)

    def show_menu(self, target: WordSpan) -> SpellingMenu | None:
        """Build and present the menu for ``target``; None if it has no suggestions."""
        self._hide_menu()

        suggestions = self.suggestions_for(target.word)
        if not suggestions:
            logger.debug("No suggestions for %r; menu not shown", target.word)
            return None

        items = [
            MenuItem(suggestion, self._apply_action(target, suggestion))
            for suggestion in suggestions[: self.config.max_suggestions]
        ]
        separator_index = len(items)
        items.append(
            MenuItem(
                f'Add "{target.word}" to dictionary',
                lambda: self.add_to_dictionary(target.word),
                icon="plus",
            )
        )

        menu = SpellingMenu(
            target=target,
            items=items,
            separator_index=separator_index,
            anchor_offset=self.editor.pos_to_offset(target.middle()),
        )
        menu.on_hide = lambda: self._forget_menu(menu)
        self.current_menu = menu
        self.presenter.show(menu)
        return menu

    def add_to_dictionary(self, word: str) -> bool:
        """
        Accept ``word`` in the live dictionary and persist it.

        Returns:
            True if the word was appended to the persisted custom dictionary,
            False if it was already there or saving failed.
        """
        if self.oracle is not None:
            self.oracle.add(word)

        previous = self.settings.custom_dictionary
        updated, added = append_word(previous, word)
        if added:
            self.settings.custom_dictionary = updated
            try:
                self.save_settings()
            except SettingsError as e:
                # Settings mirror the store, so a retry saves again.
                self.settings.custom_dictionary = previous
                self.notifier.notify(f"Could not save dictionary: {e}")
                return False

        self.notifier.notify(f'Added "{word}" to dictionary')
        return added

    def update_custom_dictionary(self, text: str) -> bool:
        """
        Replace the whole custom dictionary, save it and reload the oracle.

        If the save fails the previous word list stays in effect and the
        oracle is not reloaded.

        Returns:
            True if the dictionary was saved and reloaded.
        """
        previous = self.settings.custom_dictionary
        self.settings.custom_dictionary = text
        try:
            self.save_settings()
        except SettingsError as e:
            self.settings.custom_dictionary = previous
            self.notifier.notify(f"Could not save dictionary: {e}")
            return False
        return self.load_dictionary()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _require_oracle(self) -> SpellOracle:
        if self.oracle is None:
            raise NotInitializedError(NOT_INITIALIZED_MESSAGE)
        return self.oracle

    def _report_not_initialized(self) -> None:
        logger.error(NOT_INITIALIZED_MESSAGE)
        self.notifier.notify(NOT_INITIALIZED_MESSAGE)

    def _apply_action(self, target: WordSpan, suggestion: str) -> Callable[[], None]:
        def apply() -> None:
            self.applier.apply(target, suggestion, self.editor.get_cursor())

        return apply

    def _hide_menu(self) -> None:
        if self.current_menu is not None:
            menu = self.current_menu
            self.current_menu = None
            self.presenter.hide(menu)

    def _forget_menu(self, menu: SpellingMenu) -> None:
        if self.current_menu is menu:
            self.current_menu = None
