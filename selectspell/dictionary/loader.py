"""
Dictionary loading.

Builds a PySpellOracle either from a Hunspell ``.aff``/``.dic`` pair or
from one of pyspellchecker's bundled languages, then merges the user's
custom dictionary into it.

Only the ``.dic`` stems are loaded. Affix rules are not expanded; the
``.aff`` file is read for its ``SET`` encoding line only.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from selectspell.dictionary.custom import parse_custom_dictionary
from selectspell.dictionary.oracle import PySpellOracle
from selectspell.exceptions import DictionaryLoadError, DictionaryNotFoundError

if TYPE_CHECKING:
    from selectspell.config import SpellCheckConfig

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_ENCODING = "utf-8"
AFF_SET_PATTERN = re.compile(r"^SET\s+(\S+)")
DIC_COUNT_PATTERN = re.compile(r"^\d+\s*$")

# Hunspell names some encodings differently from Python
ENCODING_ALIASES = {
    "microsoft-cp1251": "cp1251",
    "iso8859-1": "iso-8859-1",
    "iso8859-15": "iso-8859-15",
}


# =============================================================================
# HUNSPELL FILES
# =============================================================================


def read_aff_encoding(aff_path: Path) -> str:
    """Return the character set declared by the ``SET`` line of an affix file."""
    try:
        with open(aff_path, encoding="latin-1") as f:
            for line in f:
                match = AFF_SET_PATTERN.match(line.strip())
                if match:
                    encoding = match.group(1).lower()
                    return ENCODING_ALIASES.get(encoding, encoding)
    except OSError as e:
        raise DictionaryLoadError(f"Cannot read affix file {aff_path}: {e}") from e
    return DEFAULT_ENCODING


def iter_dic_stems(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield the stem of every entry in Hunspell ``.dic`` content.

    The leading entry-count line, blank lines and comments are skipped;
    affix flags (after ``/``) and morphological fields (after whitespace)
    are dropped.

    Example:
        >>> list(iter_dic_stems(["3", "hello/MS", "world po:noun", "", "it's"]))
        ['hello', 'world', "it's"]
    """
    first = True
    for raw in lines:
        line = raw.strip()
        if first:
            first = False
            if DIC_COUNT_PATTERN.match(line):
                continue
        if not line or line.startswith("#"):
            continue
        entry = line.split(None, 1)[0]
        stem = entry.split("/", 1)[0]
        if stem:
            yield stem


def load_hunspell_dictionary(
    aff_path: Path,
    dic_path: Path,
    distance: int = 2,
    case_sensitive: bool = False,
) -> PySpellOracle:
    """
    Build an oracle from a Hunspell dictionary pair.

    Raises:
        DictionaryNotFoundError: If either file is missing.
        DictionaryLoadError: If a file cannot be read or decoded.
    """
    missing = [p.name for p in (aff_path, dic_path) if not p.exists()]
    if missing:
        raise DictionaryNotFoundError(
            f"Dictionary files not found in {dic_path.parent}: {', '.join(missing)}"
        )

    encoding = read_aff_encoding(aff_path)
    try:
        with open(dic_path, encoding=encoding) as f:
            stems = list(iter_dic_stems(f))
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise DictionaryLoadError(f"Cannot read dictionary {dic_path}: {e}") from e

    logger.info("Loaded %d stems from %s (%s)", len(stems), dic_path, encoding)
    return PySpellOracle.from_words(stems, distance=distance, case_sensitive=case_sensitive)


# =============================================================================
# CONFIG ENTRY POINT
# =============================================================================


def load_oracle(config: SpellCheckConfig, custom_dictionary: str = "") -> PySpellOracle:
    """
    Build the oracle described by ``config`` and merge custom words into it.

    Uses ``config.dictionary_dir`` when set, otherwise ``config.language``.

    Raises:
        DictionaryNotFoundError: If the configured Hunspell files are missing.
        DictionaryLoadError: If they cannot be read.
    """
    if config.dictionary_dir is not None:
        oracle = load_hunspell_dictionary(
            config.aff_path,
            config.dic_path,
            distance=config.distance,
            case_sensitive=config.case_sensitive,
        )
    else:
        oracle = PySpellOracle.for_language(
            config.language,
            distance=config.distance,
            case_sensitive=config.case_sensitive,
        )

    custom_words = parse_custom_dictionary(custom_dictionary)
    if custom_words:
        oracle.add_all(custom_words)
        logger.info("Merged %d custom word(s) into dictionary", len(custom_words))
    return oracle
