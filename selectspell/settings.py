"""
Settings persistence.

Settings are stored as a small JSON object; the custom dictionary lives
under the ``customDictionary`` key.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from selectspell.exceptions import SettingsError
from selectspell.models import Settings

logger = logging.getLogger(__name__)


class SettingsStore(Protocol):
    def load(self) -> Settings: ...

    def save(self, settings: Settings) -> None: ...


class MemorySettingsStore:
    """Keeps settings in memory; for hosts without persistence."""

    def __init__(self, settings: Settings | None = None):
        self._data = (settings or Settings()).to_dict()

    def load(self) -> Settings:
        return Settings.from_dict(dict(self._data))

    def save(self, settings: Settings) -> None:
        self._data = settings.to_dict()


class JsonSettingsStore:
    """
    Settings in a JSON file.

    A missing file loads defaults. An unreadable or malformed file is
    logged and also loads defaults, so a broken settings file never keeps
    the assistant from starting.

    Attributes:
        path: Location of the JSON file.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Settings:
        if not self.path.exists():
            logger.debug("No settings file at %s; using defaults", self.path)
            return Settings()

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Failed to load settings from %s: %s", self.path, e)
            return Settings()

        if not isinstance(data, dict):
            logger.warning("Ignoring settings in %s: expected an object", self.path)
            return Settings()
        return Settings.from_dict(data)

    def save(self, settings: Settings) -> None:
        """
        Write settings to disk.

        Raises:
            SettingsError: If the file cannot be written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(settings.to_dict(), f, indent=2)
        except OSError as e:
            logger.error("Failed to save settings to %s: %s", self.path, e)
            raise SettingsError(f"Cannot write settings to {self.path}: {e}") from e
        logger.info("Saved settings to %s", self.path)
