"""
LLM-backed engine using DSPy.

Supports Gemini (default), OpenAI, and Anthropic through DSPy's LiteLLM
model strings. Useful where no local model can be loaded at all.
"""

from __future__ import annotations

import asyncio
import os

import dspy

from anuvad.engine.base import EngineLoadError, InferenceEngine, InferenceError


DEFAULT_MODELS = {
    "gemini": "gemini-2.0-flash",
    "openai": "gpt-4o-mini",
    "anthropic": "claude-3-5-haiku-latest",
}

API_KEY_ENV = {
    "gemini": ("GOOGLE_API_KEY", "GEMINI_API_KEY"),
    "openai": ("OPENAI_API_KEY",),
    "anthropic": ("ANTHROPIC_API_KEY",),
}


class TranslateText(dspy.Signature):
    """Translate text while preserving meaning, tone, and style."""

    text: str = dspy.InputField(desc="Text to translate")
    source_language: str = dspy.InputField(
        desc="FLORES-200 code of the source language (e.g., 'eng_Latn')"
    )
    target_language: str = dspy.InputField(
        desc="FLORES-200 code of the target language (e.g., 'tel_Telu')"
    )

    translated_text: str = dspy.OutputField(desc="Translated text only")


def get_lm(provider: str, model: str = "", api_key: str = "") -> dspy.LM:
    """
    Build a DSPy LM for the given provider.

    Falls back to the provider's usual environment variables when no
    key is passed.
    """
    if provider not in DEFAULT_MODELS:
        raise EngineLoadError(f"Unknown provider: {provider}")

    model = model or DEFAULT_MODELS[provider]
    if not api_key:
        for env_var in API_KEY_ENV[provider]:
            api_key = os.getenv(env_var, "")
            if api_key:
                break
    if not api_key:
        raise EngineLoadError(f"No API key configured for {provider}")

    return dspy.LM(model=f"{provider}/{model}", api_key=api_key)


class LLMEngine(InferenceEngine):
    """Translate through a hosted LLM."""

    variant = "llm"

    def __init__(self, provider: str = "gemini", model: str = "", api_key: str = ""):
        self.provider = provider
        self.model = model
        self.api_key = api_key
        self._lm: dspy.LM | None = None
        self._predict: dspy.Predict | None = None

    async def load(self) -> None:
        self._lm = get_lm(self.provider, self.model, self.api_key)
        self._predict = dspy.Predict(TranslateText)

    def _call(self, text: str, src_code: str, tgt_code: str):
        # Pass the LM per call; global dspy settings belong to the main thread
        return self._predict(
            text=text,
            source_language=src_code,
            target_language=tgt_code,
            lm=self._lm,
        )

    async def run_inference(self, text: str, src_code: str, tgt_code: str) -> str:
        if self._predict is None:
            raise InferenceError("Engine is not loaded")

        result = await asyncio.to_thread(self._call, text, src_code, tgt_code)

        translated = getattr(result, "translated_text", None)
        if not isinstance(translated, str) or not translated.strip():
            raise InferenceError(f"Malformed LLM output: {result!r}")
        return translated.strip()
