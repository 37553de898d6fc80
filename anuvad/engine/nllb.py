"""
NLLB-200 engine backed by a Hugging Face ``transformers`` pipeline.

The same class serves both variants: ``device="auto"`` picks an
accelerator (CUDA, then Apple MPS) and refuses to load without one,
``device="cpu"`` always loads on the CPU. Pipelines are blocking, so
loading and inference run in worker threads.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from anuvad.engine.base import EngineLoadError, InferenceEngine, InferenceError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "facebook/nllb-200-distilled-600M"


def detect_accelerator() -> str | None:
    """Return the torch device name of an available accelerator, if any."""
    import torch

    if torch.cuda.is_available():
        return "cuda"
    mps = getattr(torch.backends, "mps", None)
    if mps is not None and mps.is_available():
        return "mps"
    return None


def extract_translation(result: Any) -> str:
    """Pull the translated string out of a translation pipeline result."""
    if isinstance(result, list) and result:
        first = result[0]
        if isinstance(first, dict):
            text = first.get("translation_text")
            if isinstance(text, str) and text.strip():
                return text
    raise InferenceError(f"Malformed pipeline output: {result!r}")


class NLLBEngine(InferenceEngine):
    """
    Local NLLB translation model.

    Usage:
        engine = NLLBEngine(device="auto")
        await engine.load()          # raises EngineLoadError without a GPU
        te = await engine.run_inference("Rice", "eng_Latn", "tel_Telu")
    """

    def __init__(
        self,
        model_name: str = DEFAULT_MODEL,
        device: str = "cpu",
        max_length: int = 512,
        timeout: float | None = None,
    ):
        self.model_name = model_name
        self.device = device
        self.max_length = max_length
        self.timeout = timeout
        self.variant = "accelerator" if device == "auto" else device
        self._pipeline: Any = None

    @property
    def is_loaded(self) -> bool:
        return self._pipeline is not None

    async def load(self) -> None:
        device = self.device
        if device == "auto":
            device = await asyncio.to_thread(detect_accelerator)
            if device is None:
                raise EngineLoadError("No hardware accelerator available")
            self.variant = device

        logger.info(f"Loading {self.model_name} on {device}")
        self._pipeline = await asyncio.to_thread(self._build_pipeline, device)
        logger.info(f"Loaded {self.model_name} on {device}")

    def _build_pipeline(self, device: str) -> Any:
        from transformers import pipeline

        return pipeline("translation", model=self.model_name, device=device)

    async def run_inference(self, text: str, src_code: str, tgt_code: str) -> str:
        if self._pipeline is None:
            raise InferenceError("Engine is not loaded")

        call = asyncio.to_thread(
            self._pipeline,
            text,
            src_lang=src_code,
            tgt_lang=tgt_code,
            max_length=self.max_length,
        )
        try:
            if self.timeout:
                result = await asyncio.wait_for(call, timeout=self.timeout)
            else:
                result = await call
        except asyncio.TimeoutError as e:
            raise InferenceError(f"Inference timed out after {self.timeout}s") from e

        return extract_translation(result)

    async def close(self) -> None:
        self._pipeline = None
