#!/usr/bin/env python3
"""
Basic SelectSpell Usage Example

This example demonstrates the core workflow:
1. Create an assistant for an editor buffer
2. Accept the top suggestion for the word nearest the cursor
3. Cycle through a line's misspelled words with the spelling menu
4. Add a word to the custom dictionary
"""

import logging
from pathlib import Path

from selectspell import (
    ManualScheduler,
    Position,
    SpellAssistant,
    SpellCheckConfig,
    TextBuffer,
)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # ─────────────────────────────────────────────────────────────────────────
    # 1. Setup
    # ─────────────────────────────────────────────────────────────────────────

    buffer = TextBuffer("Helo wrold, teh quick fox", cursor=Position(0, 2))
    config = SpellCheckConfig(settings_path=Path("selectspell-settings.json"))

    # A manual clock keeps this script single-threaded; hosts with an
    # event loop would pass AsyncioScheduler() instead.
    scheduler = ManualScheduler()
    assistant = SpellAssistant.from_config(buffer, config, scheduler=scheduler)

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Accept Top Suggestion
    # ─────────────────────────────────────────────────────────────────────────

    assistant.accept_top_suggestion()
    print(f"After accept: {buffer.text!r}  cursor={buffer.get_cursor()}")

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Cycle With the Spelling Menu
    # ─────────────────────────────────────────────────────────────────────────

    for _ in range(3):
        menu = assistant.open_spelling_menu()
        if menu is None:
            break
        print(f"Menu for {menu.target.word!r}: {menu.suggestions}")

    # An idle second ends the cycle; the next menu starts from the cursor again
    scheduler.advance(config.cycle_reset_delay)
    menu = assistant.open_spelling_menu()
    if menu is not None:
        menu.choose(0)
        print(f"After choosing: {buffer.text!r}")

    # ─────────────────────────────────────────────────────────────────────────
    # 4. Custom Dictionary
    # ─────────────────────────────────────────────────────────────────────────

    assistant.add_to_dictionary("selectspell")
    print(f"Custom dictionary: {assistant.settings.custom_dictionary!r}")

    assistant.close()


if __name__ == "__main__":
    main()
