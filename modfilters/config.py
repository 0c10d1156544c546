"""
Configuration for the filter framework.

Defaults can be overridden by a settings.json file and by environment
variables (a .env file in the working directory is honoured).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from modfilters.utils.json_utils import load_json
from modfilters.utils.paths import get_resources_dir

logger = logging.getLogger("modfilters.config")


__all__ = ["Config", "config"]


@dataclass
class Config:
    """
    Central configuration handling for the application.
    Manages resource paths, locale defaults and the module catalog location.
    """

    I18N_DIR: Path = field(default_factory=lambda: get_resources_dir() / "i18n")

    SETTINGS_FILE: Path = Path.cwd() / "settings.json"

    # Default values
    UI_LANGUAGE: str = "en"
    # Language of rendered filter panels
    DEFAULT_LOCALE: str = "en"
    LOG_LEVEL: str = "INFO"

    # Module catalog (JSON list of module entries)
    CATALOG_FILE: Path | None = None

    def __post_init__(self):
        """Load settings and environment overrides after instantiation."""
        self._load_settings()

        load_dotenv(find_dotenv(usecwd=True))
        env_language = os.getenv("MODFILTERS_LANGUAGE")
        if env_language:
            self.UI_LANGUAGE = env_language
        env_locale = os.getenv("MODFILTERS_LOCALE")
        if env_locale:
            self.DEFAULT_LOCALE = env_locale
        env_catalog = os.getenv("MODFILTERS_CATALOG")
        if env_catalog:
            self.CATALOG_FILE = Path(env_catalog)
        env_level = os.getenv("MODFILTERS_LOG_LEVEL")
        if env_level:
            self.LOG_LEVEL = env_level

    def _load_settings(self) -> None:
        """Load settings from JSON file."""
        data = load_json(self.SETTINGS_FILE)
        if not isinstance(data, dict):
            logger.error("Ignoring %s: expected a JSON object", self.SETTINGS_FILE)
            return

        self.UI_LANGUAGE = data.get("ui_language", self.UI_LANGUAGE)
        self.DEFAULT_LOCALE = data.get("default_locale", self.DEFAULT_LOCALE)
        self.LOG_LEVEL = data.get("log_level", self.LOG_LEVEL)

        catalog = data.get("catalog_file")
        if catalog:
            self.CATALOG_FILE = Path(catalog)


# Global instance
config = Config()
