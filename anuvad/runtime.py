"""
Translation runtime (dependency injection container).

Build one per process at startup and hand it to whatever needs
translation. Everything stateful (the loaded model, the cache) lives
here, so sessions created from the same runtime share it.
"""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel

from anuvad.config import Settings, get_settings
from anuvad.engine.base import InferenceEngine
from anuvad.engine.llm import LLMEngine
from anuvad.engine.loader import ModelLoader, ModelState
from anuvad.engine.nllb import NLLBEngine
from anuvad.i18n.cache import TranslationCache
from anuvad.i18n.languages import Language, parse_language
from anuvad.i18n.session import TranslationSession
from anuvad.i18n.static import StaticDictionary
from anuvad.i18n.translator import Translator


class TranslationRuntime(BaseModel):
    """
    Container for the shared translation components.

    Usage:
        runtime = create_runtime()
        session = runtime.session("te")
        await session.translate("Pesarattu")
    """

    model_config = {"arbitrary_types_allowed": True}

    loader: ModelLoader
    translator: Translator
    cache: TranslationCache
    dictionary: StaticDictionary
    source_language: Language = Language.EN

    @property
    def state(self) -> ModelState:
        return self.loader.state

    async def initialize(self) -> ModelState:
        return await self.loader.initialize()

    def session(
        self,
        language: str | Language,
        source: str | Language | None = None,
    ) -> TranslationSession:
        """Create a session viewing ``language``, sharing this runtime's state."""
        return TranslationSession(
            translator=self.translator,
            cache=self.cache,
            dictionary=self.dictionary,
            current_language=language,
            source_language=source or self.source_language,
        )

    async def close(self) -> None:
        await self.loader.close()


def build_engines(settings: Settings) -> list[InferenceEngine]:
    """Engine candidates in the order the loader should try them."""
    if settings.engine_backend == "llm":
        return [
            LLMEngine(
                provider=settings.llm_provider,
                model=settings.llm_model,
                api_key=settings.llm_api_key,
            )
        ]

    if settings.engine_backend != "nllb":
        raise ValueError(f"Unknown engine backend: {settings.engine_backend}")

    devices = ["auto", "cpu"] if settings.prefer_hardware else ["cpu"]
    return [
        NLLBEngine(
            model_name=settings.model_name,
            device=device,
            max_length=settings.max_length,
            timeout=settings.inference_timeout,
        )
        for device in devices
    ]


def create_runtime(
    settings: Settings | None = None,
    engines: Sequence[InferenceEngine] | None = None,
) -> TranslationRuntime:
    """
    Build a runtime from settings.

    Nothing is loaded here; the model loads on the first translation or
    an explicit ``initialize()``.
    """
    settings = settings or get_settings()
    if engines is None:
        engines = build_engines(settings)

    loader = ModelLoader(engines)
    return TranslationRuntime(
        loader=loader,
        translator=Translator(loader),
        cache=TranslationCache(),
        dictionary=StaticDictionary.load(settings.static_strings_path or None),
        source_language=parse_language(settings.source_language),
    )
