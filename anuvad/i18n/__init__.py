"""
Internationalization - model-backed translation with caching.

Design:
1. Fast path: curated UI strings from a static dictionary, synchronous
2. Slow path: cache, then the inference engine, asynchronous
3. Lazy - the model loads on first use
4. Fail-open - any failure shows the original text

Usage:
    from anuvad.runtime import create_runtime

    runtime = create_runtime()
    session = runtime.session("te")

    name_te = await session.translate("Gongura Pachadi")
    names_te = await session.translate_batch(["Idli", "Vada"])
    label = session.static_lookup("Trending Dishes")
"""

from anuvad.i18n.languages import (
    Language,
    ENGINE_CODES,
    SUPPORTED_LANGUAGES,
    UnsupportedLanguageError,
    get_language_by_code,
    get_language_name,
    normalize_language_code,
    parse_language,
)
from anuvad.i18n.cache import CachePartition, TranslationCache
from anuvad.i18n.static import StaticDictionary, StaticDictionaryError
from anuvad.i18n.translator import Translation, Translator
from anuvad.i18n.session import TranslationSession
from anuvad.i18n.warmup import UI_STRINGS, warm_translation_cache

__all__ = [
    # Languages
    "Language",
    "ENGINE_CODES",
    "SUPPORTED_LANGUAGES",
    "UnsupportedLanguageError",
    "get_language_by_code",
    "get_language_name",
    "normalize_language_code",
    "parse_language",
    # Cache
    "CachePartition",
    "TranslationCache",
    # Static strings
    "StaticDictionary",
    "StaticDictionaryError",
    # Translation
    "Translation",
    "Translator",
    "TranslationSession",
    # Cache warming
    "UI_STRINGS",
    "warm_translation_cache",
]
