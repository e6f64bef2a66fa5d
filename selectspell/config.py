"""
Configuration for the SelectSpell assistant.

All options have sensible defaults; the assistant works with
``SpellCheckConfig()`` and pyspellchecker's bundled English dictionary.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class SpellCheckConfig:
    """
    Configuration for spell checking and suggestion cycling.

    Example:
        >>> config = SpellCheckConfig(
        ...     dictionary_dir=Path("~/.config/selectspell/dict").expanduser(),
        ...     settings_path=Path("~/.config/selectspell/data.json").expanduser(),
        ... )
        >>> assistant = SpellAssistant.from_config(buffer, config)
    """

    # Cycling
    cycle_reset_delay: float = 1.0  # seconds of idle time before a cycle starts over

    # Menu
    max_suggestions: int = 10

    # Tokenizer
    min_word_length: int = 2

    # Dictionary source: Hunspell files in dictionary_dir, else a bundled language
    dictionary_dir: Path | None = None
    aff_filename: str = "index.aff"
    dic_filename: str = "index.dic"
    language: str | None = "en"

    # pyspellchecker options
    distance: int = 2  # edit distance for suggestions
    case_sensitive: bool = False

    # Persistence
    settings_path: Path | None = None

    def __post_init__(self):
        """Validate configuration."""
        if self.cycle_reset_delay <= 0:
            raise ValueError(f"cycle_reset_delay must be > 0, got {self.cycle_reset_delay}")
        if self.max_suggestions < 1:
            raise ValueError(f"max_suggestions must be >= 1, got {self.max_suggestions}")
        if self.min_word_length < 1:
            raise ValueError(f"min_word_length must be >= 1, got {self.min_word_length}")
        if self.distance not in (1, 2):
            raise ValueError(f"distance must be 1 or 2, got {self.distance}")
        if self.dictionary_dir is None and self.language is None:
            raise ValueError("either dictionary_dir or language must be set")

        if self.dictionary_dir is not None:
            self.dictionary_dir = Path(self.dictionary_dir)
        if self.settings_path is not None:
            self.settings_path = Path(self.settings_path)

    @property
    def aff_path(self) -> Path | None:
        if self.dictionary_dir is None:
            return None
        return self.dictionary_dir / self.aff_filename

    @property
    def dic_path(self) -> Path | None:
        if self.dictionary_dir is None:
            return None
        return self.dictionary_dir / self.dic_filename
