"""
Inference engines and the loader that picks one.

Engines:
- NLLBEngine: local NLLB-200 via transformers (accelerator or CPU)
- LLMEngine: hosted LLM via DSPy
"""

from anuvad.engine.base import (
    EngineError,
    EngineLoadError,
    InferenceEngine,
    InferenceError,
)
from anuvad.engine.loader import ModelLoader, ModelState
from anuvad.engine.nllb import NLLBEngine
from anuvad.engine.llm import LLMEngine

__all__ = [
    "EngineError",
    "EngineLoadError",
    "InferenceEngine",
    "InferenceError",
    "ModelLoader",
    "ModelState",
    "NLLBEngine",
    "LLMEngine",
]
