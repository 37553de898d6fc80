"""
Static dictionary of curated UI strings.

Loaded once from YAML and frozen. Lookups are plain dict reads and never
involve the model.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from anuvad.i18n.languages import Language, get_language_by_code

DEFAULT_PATH = Path(__file__).parent / "data" / "static_strings.yaml"


class StaticDictionaryError(Exception):
    """Raised when a static strings file is malformed."""
    pass


class StaticDictionary:
    """
    Immutable mapping of (key, language) to a literal translation.

    Usage:
        strings = StaticDictionary.load()
        strings.lookup("Recipes", Language.TE)     # -> "వంటకాలు"
        strings.lookup("NoSuchKey", Language.TE)   # -> "NoSuchKey"
    """

    def __init__(self, entries: Mapping[Language, Mapping[str, str]] | None = None):
        entries = entries or {}
        self._entries: Mapping[Language, Mapping[str, str]] = MappingProxyType({
            language: MappingProxyType(dict(strings))
            for language, strings in entries.items()
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StaticDictionary:
        """Build from ``{language_code: {key: literal}}``."""
        if not isinstance(data, dict):
            raise StaticDictionaryError("Static strings must be a mapping of languages")

        entries: dict[Language, dict[str, str]] = {}
        for code, strings in data.items():
            language = get_language_by_code(str(code))
            if language is None:
                raise StaticDictionaryError(f"Unknown language in static strings: {code}")
            if not isinstance(strings, dict):
                raise StaticDictionaryError(f"Strings for '{code}' must be a mapping")
            entries[language] = {str(key): str(value) for key, value in strings.items()}

        return cls(entries)

    @classmethod
    def load(cls, path: Path | str | None = None) -> StaticDictionary:
        """Load from a YAML file (the packaged strings by default)."""
        path = Path(path) if path else DEFAULT_PATH
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    def lookup(self, key: str, language: Language) -> str:
        """Return the curated literal, or ``key`` itself if there is none."""
        strings = self._entries.get(language)
        if strings is None:
            return key
        return strings.get(key, key)

    def keys(self, language: Language) -> list[str]:
        return list(self._entries.get(language, {}))

    @property
    def languages(self) -> list[Language]:
        return list(self._entries)
