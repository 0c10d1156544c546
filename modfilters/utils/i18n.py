"""
Internationalization (i18n) system.

Loads translation files dynamically:
1. Shared files from resources/i18n/*.json (language-agnostic: logs)
2. Locale-specific files from resources/i18n/{locale}/*.json

An I18n instance is a localization context for exactly one language. Filter
declarations receive it per render call and never keep it, so a single
registry can serve several languages side by side.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from modfilters.utils.paths import get_resources_dir

__all__ = ["I18n", "LANGUAGE_NAMES", "available_locales", "get_i18n", "t"]

logger = logging.getLogger("modfilters.i18n")

FALLBACK_LOCALE = "en"

# Native names shown in the language selector
LANGUAGE_NAMES: dict[str, str] = {
    "ca-CT": "Català",
    "da": "Dansk",
    "de": "Deutsch",
    "et": "Eesti",
    "en": "English",
    "eu": "Euskara",
    "es": "Español",
    "eo": "Esperanto",
    "fr": "Français",
    "fy": "Frysk",
    "it": "Italiano",
    "hu": "Magyar",
    "nl": "Nederlands",
    "no": "Norsk",
    "pl": "Polski",
    "pt-PT": "Português",
    "pt-BR": "Português do Brasil",
    "fi": "Suomi",
    "sv": "Svenska",
    "tr": "Türkçe",
    "ca-VA": "Valencià",
    "cs": "Čeština",
    "el": "Ελληνικά",
    "bg": "Български",
    "ru": "Русский",
    "uk": "Українська",
    "he": "עברית",
    "ar": "العربية",
    "th": "ภาษาไทย",
    "ja": "日本語",
    "zh-CN": "简体中文",
    "zh-TW": "繁體中文",
    "ko": "한국어",
}


class I18n:
    """Translation lookup for a single locale.

    Loads shared files from resources/i18n/ root, then the English fallback,
    then the requested locale on top.
    """

    def __init__(self, locale: str = FALLBACK_LOCALE, i18n_root: Path | None = None) -> None:
        """Initialize I18n with a specific locale code.

        Args:
            locale: The locale code used to find the corresponding
                directory in resources/i18n/.
            i18n_root: Directory holding the translation files. Defaults to
                the bundled resources/i18n/.
        """
        self.locale = locale
        self.i18n_root = i18n_root if i18n_root is not None else get_resources_dir() / "i18n"
        self.translations: dict[str, Any] = {}
        self.fallback_translations: dict[str, Any] = {}

        self._load_translations()

    def __repr__(self) -> str:
        return f"I18n(locale={self.locale!r})"

    def _load_translations(self) -> None:
        """Load translations in priority order.

        1. Load shared files from resources/i18n/*.json
        2. Load English fallback from resources/i18n/en/*.json
        3. Deep-merge shared + English = fallback
        4. If locale != 'en': load target locale, merge on top of fallback
        """
        shared_data = self._load_json_directory(self.i18n_root)
        en_data = self._load_json_directory(self.i18n_root / FALLBACK_LOCALE)
        self.fallback_translations = _deep_merge(shared_data, en_data)

        if self.locale == FALLBACK_LOCALE:
            self.translations = self.fallback_translations
            return

        locale_dir = self.i18n_root / self.locale
        if not locale_dir.is_dir():
            logger.warning("No translations for locale %s, using %s", self.locale, FALLBACK_LOCALE)
        self.translations = _deep_merge(self.fallback_translations, self._load_json_directory(locale_dir))

    @staticmethod
    def _load_json_directory(directory: Path) -> dict[str, Any]:
        """Loads and deep-merges all JSON files from a directory.

        Args:
            directory: Path to scan for ``*.json`` files.

        Returns:
            Merged dictionary of all JSON files found.
        """
        merged: dict[str, Any] = {}
        if not directory.exists():
            return merged
        for file_path in sorted(directory.glob("*.json")):
            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    merged = _deep_merge(merged, json.load(f))
            except (OSError, json.JSONDecodeError) as e:
                logger.error("Error loading i18n file %s: %s", file_path.name, e)
        return merged

    def has(self, key: str) -> bool:
        """Checks whether a dot-notation key resolves to a string."""
        return isinstance(self._lookup(key), str)

    def _lookup(self, key: str) -> Any:
        value: Any = self.translations
        for k in key.split("."):
            if not isinstance(value, dict):
                return None
            value = value.get(k)
        return value

    def t(self, key: str, **kwargs: Any) -> str:
        """Retrieve a translated string by dot-notation key.

        Args:
            key: Dot-separated key path (e.g. 'filters.flags.yes').
            **kwargs: Format arguments for string interpolation.

        Returns:
            Translated string, or '[key]' if not found.
        """
        value = self._lookup(key)
        if not isinstance(value, str):
            return f"[{key}]"

        if kwargs:
            try:
                return value.format(**kwargs)
            except (ValueError, KeyError, IndexError):
                return value

        return value


def _deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Recursive merge of dictionaries.

    Args:
        base: The base dictionary.
        update: The dictionary whose values override base.

    Returns:
        New dictionary with merged values.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def available_locales() -> list[str]:
    """Return the locale codes that ship a translation directory.

    Returns:
        Sorted locale codes, restricted to languages listed in LANGUAGE_NAMES.
    """
    root = get_resources_dir() / "i18n"
    return sorted(p.name for p in root.iterdir() if p.is_dir() and p.name in LANGUAGE_NAMES)


@lru_cache(maxsize=None)
def get_i18n(locale: str = FALLBACK_LOCALE) -> I18n:
    """Return the shared I18n instance for a locale, loading it on first use.

    Args:
        locale: The locale code to use.

    Returns:
        The cached I18n instance.
    """
    return I18n(locale)


def t(key: str, locale: str = FALLBACK_LOCALE, **kwargs: Any) -> str:
    """Retrieve a translated string for a locale.

    Args:
        key: Dot-separated key path.
        locale: The locale to translate into.
        **kwargs: Format arguments for string interpolation.

    Returns:
        Translated string, or '[key]' if not found.
    """
    return get_i18n(locale).t(key, **kwargs)
