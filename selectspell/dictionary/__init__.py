"""
Dictionary oracle and loading.

The core only depends on the SpellOracle protocol. PySpellOracle wraps
pyspellchecker; the loader feeds it from Hunspell files or a bundled
language and merges the user's custom words.
"""

from selectspell.dictionary.custom import append_word, parse_custom_dictionary
from selectspell.dictionary.loader import (
    iter_dic_stems,
    load_hunspell_dictionary,
    load_oracle,
)
from selectspell.dictionary.oracle import PySpellOracle, SpellOracle, match_case

__all__ = [
    # Oracle
    "SpellOracle",
    "PySpellOracle",
    "match_case",
    # Loading
    "load_oracle",
    "load_hunspell_dictionary",
    "iter_dic_stems",
    # Custom dictionary
    "parse_custom_dictionary",
    "append_word",
]
