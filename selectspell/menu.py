"""
Spelling menu model and presentation hooks.

The assistant builds a ``SpellingMenu`` (suggestions, a separator, and an
"add to dictionary" entry) and hands it to a ``MenuPresenter``. Drawing
and placement belong to the host; the presenter reports the user's pick
by calling ``menu.choose(index)``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from selectspell.models import WordSpan

logger = logging.getLogger(__name__)


@dataclass
class MenuItem:
    """A selectable menu entry."""

    title: str
    action: Callable[[], None]
    icon: str | None = None


@dataclass
class SpellingMenu:
    """
    Choices for one misspelled word.

    ``items`` holds the suggestion entries followed by the add-to-dictionary
    entry; ``separator_index`` marks where a host should draw a divider.
    """

    target: WordSpan
    items: list[MenuItem] = field(default_factory=list)
    separator_index: int = 0
    anchor_offset: int | None = None  # editor offset to place the menu at
    on_hide: Callable[[], None] | None = None

    @property
    def suggestions(self) -> list[str]:
        return [item.title for item in self.items[: self.separator_index]]

    def choose(self, index: int) -> None:
        """Run the action of the item at ``index``."""
        item = self.items[index]
        logger.debug("Menu choice %d: %s", index, item.title)
        item.action()

    def hidden(self) -> None:
        """Called by the presenter once the menu is gone."""
        if self.on_hide is not None:
            self.on_hide()


class MenuPresenter(Protocol):
    def show(self, menu: SpellingMenu) -> None: ...

    def hide(self, menu: SpellingMenu) -> None: ...


class RecordingPresenter:
    """
    Presenter that only remembers what it was asked to show.

    Hosts without a UI, and tests, read ``shown`` and drive choices with
    ``menu.choose``.
    """

    def __init__(self):
        self.shown: list[SpellingMenu] = []
        self.visible: SpellingMenu | None = None

    def show(self, menu: SpellingMenu) -> None:
        self.shown.append(menu)
        self.visible = menu

    def hide(self, menu: SpellingMenu) -> None:
        if self.visible is menu:
            self.visible = None
        menu.hidden()
