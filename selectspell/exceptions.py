"""
Exception classes for SelectSpell.

All SelectSpell exceptions inherit from SelectSpellError,
making it easy to catch all library errors.

Commands on SpellAssistant never let these escape into the host editor;
they are raised by the loader and settings store and absorbed at the
command boundary.

Example:
    >>> try:
    ...     oracle = load_oracle(SpellCheckConfig(dictionary_dir=Path("dicts")))
    ... except selectspell.DictionaryNotFoundError as e:
    ...     print(f"Missing dictionary: {e}")
    ... except selectspell.SelectSpellError as e:
    ...     print(f"SelectSpell error: {e}")
"""


class SelectSpellError(Exception):
    """
    Base exception for all SelectSpell errors.

    Catch this to handle any SelectSpell-specific error.
    """

    pass


class DictionaryNotFoundError(SelectSpellError):
    """
    Raised when the dictionary files are missing.

    Example:
        >>> load_hunspell_dictionary(Path("empty_dir/index.aff"), Path("empty_dir/index.dic"))
        DictionaryNotFoundError: Dictionary files not found in empty_dir: index.aff, index.dic
    """

    pass


class DictionaryLoadError(SelectSpellError):
    """Raised when dictionary files exist but cannot be read or parsed."""

    pass


class NotInitializedError(SelectSpellError):
    """
    Raised when an operation needs a dictionary oracle and none is loaded.

    SpellAssistant catches this and turns it into a user notice.
    """

    pass


class SettingsError(SelectSpellError):
    """Raised when settings cannot be written."""

    pass
