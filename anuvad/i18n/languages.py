"""
Supported languages and utilities.

Each language maps to the code the inference engine understands
(FLORES-200 codes for NLLB). Adding a language means adding an enum
member and its engine code; the module refuses to import otherwise.
"""

from __future__ import annotations

from enum import Enum


class UnsupportedLanguageError(ValueError):
    """Raised when a language code is not one of the supported languages."""
    pass


class Language(str, Enum):
    """Supported languages."""

    EN = "en"      # English
    TE = "te"      # Telugu

    @property
    def engine_code(self) -> str:
        """Engine-specific code for this language."""
        return ENGINE_CODES[self]

    @property
    def display_name(self) -> str:
        return LANGUAGE_NAMES[self]


ENGINE_CODES: dict[Language, str] = {
    Language.EN: "eng_Latn",
    Language.TE: "tel_Telu",
}


# Human-readable names, in the language itself where it helps a picker
LANGUAGE_NAMES: dict[Language, str] = {
    Language.EN: "English",
    Language.TE: "తెలుగు",
}


_unmapped = [lang.value for lang in Language if lang not in ENGINE_CODES]
if _unmapped:
    raise RuntimeError(f"Languages without an engine code: {', '.join(_unmapped)}")


SUPPORTED_LANGUAGES = list(Language)


# =============================================================================
# Utilities
# =============================================================================


def normalize_language_code(code: str) -> str:
    """Normalize language code to standard form."""
    code = code.lower().strip()

    variants = {
        "english": "en",
        "eng": "en",
        "eng_latn": "en",
        "telugu": "te",
        "tel": "te",
        "tel_telu": "te",
    }

    return variants.get(code, code)


def get_language_by_code(code: str) -> Language | None:
    """Get Language enum by code."""
    code = normalize_language_code(code)
    try:
        return Language(code)
    except ValueError:
        return None


def parse_language(value: str | Language) -> Language:
    """
    Coerce a code, name, or Language into a Language.

    Raises:
        UnsupportedLanguageError: if the value names no supported language
    """
    if isinstance(value, Language):
        return value

    language = get_language_by_code(str(value))
    if language is None:
        supported = ", ".join(lang.value for lang in Language)
        raise UnsupportedLanguageError(
            f"Unsupported language: {value!r}. Supported: {supported}"
        )
    return language


def get_language_name(code: str | Language) -> str:
    """Get human-readable language name."""
    language = code if isinstance(code, Language) else get_language_by_code(code)
    if language is None:
        return str(code)
    return LANGUAGE_NAMES[language]
