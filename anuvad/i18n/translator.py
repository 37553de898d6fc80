"""
Translation client.

The only component that talks to the inference engine and the only one
that knows engine language codes. Fail-open throughout: whatever goes
wrong, the caller gets text back.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Sequence

from anuvad.engine.loader import ModelLoader, ModelState
from anuvad.i18n.languages import Language, parse_language

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Translation:
    """Outcome of translating one text."""

    source_text: str
    text: str
    # True only when ``text`` is genuine engine output
    from_engine: bool = False


class Translator:
    """
    Engine-backed translator.

    Usage:
        translator = Translator(loader)

        te = await translator.translate("Lemon rice", "en", "te")
        te_list = await translator.translate_batch(["Idli", "Dosa"], "en", "te")

    Returns the input unchanged when source and target match, when the
    text is empty, when the model failed to load, or when inference fails.
    """

    def __init__(self, loader: ModelLoader):
        self.loader = loader

    # =========================================================================
    # Single text
    # =========================================================================

    async def translate(
        self,
        text: str,
        source: str | Language,
        target: str | Language,
    ) -> str:
        translation = await self.translate_detailed(text, source, target)
        return translation.text

    async def translate_detailed(
        self,
        text: str,
        source: str | Language,
        target: str | Language,
    ) -> Translation:
        """Translate one text and report whether the engine produced it."""
        source = parse_language(source)
        target = parse_language(target)

        if not text or source == target:
            return Translation(text, text)

        state = await self.loader.initialize()
        if state != ModelState.READY:
            return Translation(text, text)

        return await self._run(text, source, target)

    async def _run(self, text: str, source: Language, target: Language) -> Translation:
        engine = self.loader.engine
        try:
            result = await engine.run_inference(
                text, source.engine_code, target.engine_code
            )
        except Exception as e:
            logger.warning(f"Translation failed ({source.value}->{target.value}): {e}")
            return Translation(text, text)

        if not isinstance(result, str) or not result.strip():
            logger.warning(
                f"Translation returned malformed output ({source.value}->{target.value}): "
                f"{result!r}"
            )
            return Translation(text, text)

        return Translation(text, result, from_engine=True)

    # =========================================================================
    # Batch
    # =========================================================================

    async def translate_batch(
        self,
        texts: Sequence[str],
        source: str | Language,
        target: str | Language,
    ) -> list[str]:
        translations = await self.translate_batch_detailed(texts, source, target)
        return [t.text for t in translations]

    async def translate_batch_detailed(
        self,
        texts: Sequence[str],
        source: str | Language,
        target: str | Language,
    ) -> list[Translation]:
        """
        Translate many texts concurrently.

        Each distinct text is sent to the engine once; the result is
        placed at every index where that text appears, so the output
        lines up with ``texts`` no matter which call finishes first.
        """
        source = parse_language(source)
        target = parse_language(target)

        results: list[Translation | None] = [None] * len(texts)

        # Distinct non-empty text -> every position it occupies
        positions: dict[str, list[int]] = {}
        for i, text in enumerate(texts):
            if not text or source == target:
                results[i] = Translation(text, text)
            else:
                positions.setdefault(text, []).append(i)

        if positions:
            state = await self.loader.initialize()
            if state != ModelState.READY:
                for text, indices in positions.items():
                    for i in indices:
                        results[i] = Translation(text, text)
                positions = {}

        async def run_tagged(text: str, indices: list[int]):
            return indices, await self._run(text, source, target)

        tasks = [
            asyncio.ensure_future(run_tagged(text, indices))
            for text, indices in positions.items()
        ]
        for finished in asyncio.as_completed(tasks):
            indices, translation = await finished
            for i in indices:
                results[i] = translation

        return results
