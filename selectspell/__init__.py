"""
SelectSpell: keyboard-driven, line-scoped spell checking for text editors.

Finds misspelled words on the cursor's line, picks the one nearest the
cursor, and lets the user accept the top suggestion or cycle through the
line's misspelled words with a suggestions menu.

Example:
    >>> from selectspell import Position, SpellAssistant, SpellCheckConfig, TextBuffer
    >>> buffer = TextBuffer("Helo wrold", cursor=Position(0, 2))
    >>> assistant = SpellAssistant.from_config(buffer, SpellCheckConfig())
    >>> menu = assistant.open_spelling_menu()
    >>> menu.target.word
    'Helo'
    >>> menu.choose(0)
    >>> buffer.text
    'Hello wrold'
"""

from selectspell.assistant import LoggingNotifier, Notifier, SpellAssistant
from selectspell.config import SpellCheckConfig
from selectspell.core import (
    CyclingSession,
    LineScanner,
    SuggestionApplier,
    Token,
    closest,
    closest_index,
    reposition_cursor,
    tokenize,
)
from selectspell.dictionary import (
    PySpellOracle,
    SpellOracle,
    load_hunspell_dictionary,
    load_oracle,
)
from selectspell.editor import EditorSurface, TextBuffer
from selectspell.exceptions import (
    DictionaryLoadError,
    DictionaryNotFoundError,
    NotInitializedError,
    SelectSpellError,
    SettingsError,
)
from selectspell.menu import MenuItem, MenuPresenter, RecordingPresenter, SpellingMenu
from selectspell.models import Position, SessionState, Settings, WordSpan
from selectspell.scheduling import (
    AsyncioScheduler,
    ManualScheduler,
    Scheduler,
    ThreadingScheduler,
)
from selectspell.settings import JsonSettingsStore, MemorySettingsStore, SettingsStore

__version__ = "0.1.0"
__all__ = [
    # Main API
    "SpellAssistant",
    "SpellCheckConfig",
    # Core
    "tokenize",
    "Token",
    "LineScanner",
    "closest",
    "closest_index",
    "CyclingSession",
    "SuggestionApplier",
    "reposition_cursor",
    # Models
    "Position",
    "WordSpan",
    "SessionState",
    "Settings",
    # Dictionary
    "SpellOracle",
    "PySpellOracle",
    "load_oracle",
    "load_hunspell_dictionary",
    # Host collaborators
    "EditorSurface",
    "TextBuffer",
    "MenuItem",
    "MenuPresenter",
    "RecordingPresenter",
    "SpellingMenu",
    "Notifier",
    "LoggingNotifier",
    "SettingsStore",
    "JsonSettingsStore",
    "MemorySettingsStore",
    "Scheduler",
    "ThreadingScheduler",
    "AsyncioScheduler",
    "ManualScheduler",
    # Exceptions
    "SelectSpellError",
    "DictionaryNotFoundError",
    "DictionaryLoadError",
    "NotInitializedError",
    "SettingsError",
]
