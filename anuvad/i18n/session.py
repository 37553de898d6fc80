"""
Translation session - what UI code talks to.

A session is bound to the language the user is currently viewing. It
puts the cache in front of the translator, tracks whether an engine
round-trip is outstanding, and serves curated UI strings synchronously.
Sessions are cheap; all of them in a runtime share one loader and one
cache.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Sequence

from anuvad.engine.loader import ModelState
from anuvad.i18n.cache import TranslationCache
from anuvad.i18n.languages import Language, parse_language
from anuvad.i18n.static import StaticDictionary
from anuvad.i18n.translator import Translator


class TranslationSession:
    """
    Cache-aware translation for one current language.

    Usage:
        session = runtime.session("te")
        await session.initialize()

        title = await session.translate("Hyderabadi Biryani")
        tags = await session.translate_batch(["Spicy", "Rice", "Festive"])
        label = session.static_lookup("Recipes")   # no await, no model
    """

    def __init__(
        self,
        translator: Translator,
        cache: TranslationCache,
        dictionary: StaticDictionary,
        current_language: str | Language,
        source_language: str | Language = Language.EN,
    ):
        self._translator = translator
        self._cache = cache
        self._dictionary = dictionary
        self._current_language = parse_language(current_language)
        self._source_language = parse_language(source_language)
        self._in_flight = 0

    # =========================================================================
    # State
    # =========================================================================

    @property
    def current_language(self) -> Language:
        return self._current_language

    @property
    def source_language(self) -> Language:
        return self._source_language

    @property
    def is_initialized(self) -> bool:
        """True once the model finished loading (or gave up)."""
        return self._translator.loader.is_settled

    @property
    def is_translating(self) -> bool:
        """True while at least one engine round-trip is outstanding."""
        return self._in_flight > 0

    @property
    def model_state(self) -> ModelState:
        return self._translator.loader.state

    async def initialize(self) -> None:
        await self._translator.loader.initialize()

    def switch_language(self, language: str | Language) -> None:
        """
        Change the language being viewed.

        Calls already in flight finish for the old language and still
        fill the cache.
        """
        self._current_language = parse_language(language)

    async def _engine_ready(self) -> bool:
        loader = self._translator.loader
        await loader.initialize()
        return loader.state == ModelState.READY

    @contextmanager
    def _round_trip(self) -> Iterator[None]:
        self._in_flight += 1
        try:
            yield
        finally:
            self._in_flight -= 1

    # =========================================================================
    # Slow path
    # =========================================================================

    async def translate(self, text: str, skip_cache: bool = False) -> str:
        """
        Translate ``text`` into the current language.

        Args:
            text: Text in the source language
            skip_cache: Go to the engine even if a cached value exists

        Returns:
            The translation, or ``text`` when nothing could be translated
        """
        target = self._current_language
        if not text or target == self._source_language:
            return text

        if not skip_cache:
            cached = self._cache.get(text, target)
            if cached is not None:
                return cached

        if not await self._engine_ready():
            return text

        with self._round_trip():
            translation = await self._translator.translate_detailed(
                text, self._source_language, target
            )

        if translation.from_engine:
            self._cache.set(text, target, translation.text)
        return translation.text

    async def translate_batch(self, texts: Sequence[str]) -> list[str]:
        """
        Translate many texts into the current language, in input order.

        Only texts missing from the cache reach the engine.
        """
        target = self._current_language
        if target == self._source_language:
            return list(texts)

        partition = self._cache.partition(texts, target)
        if partition.complete:
            return self._cache.merge(texts, partition, [])

        misses = [texts[i] for i in partition.misses]
        if not any(misses) or not await self._engine_ready():
            return self._cache.merge(texts, partition, misses)

        with self._round_trip():
            translations = await self._translator.translate_batch_detailed(
                misses, self._source_language, target
            )

        for translation in translations:
            if translation.from_engine:
                self._cache.set(translation.source_text, target, translation.text)

        return self._cache.merge(texts, partition, [t.text for t in translations])

    # =========================================================================
    # Fast path
    # =========================================================================

    def static_lookup(self, key: str, language: str | Language | None = None) -> str:
        """Curated literal for ``key``, or ``key`` itself if there is none."""
        language = parse_language(language) if language else self._current_language
        return self._dictionary.lookup(key, language)

    def __repr__(self) -> str:
        return (
            f"<TranslationSession({self._source_language.value}->"
            f"{self._current_language.value}, state={self.model_state.value})>"
        )
