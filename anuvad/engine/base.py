"""
Base class for inference engines.

An engine wraps one translation backend. It is created cheap and
unloaded; ``load()`` acquires the heavy resources (model weights, API
clients) and may fail, which is how the loader decides to fall back to
the next candidate.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class EngineError(Exception):
    """Base error for inference engines."""
    pass


class EngineLoadError(EngineError):
    """Raised when an engine cannot acquire its backend."""
    pass


class InferenceError(EngineError):
    """Raised when a single inference call fails or returns garbage."""
    pass


class InferenceEngine(ABC):
    """
    Base class for all inference engines.

    Engine codes (e.g. ``eng_Latn``) are passed straight through; the
    engine never sees ``Language`` values.

    Example:
        class EchoEngine(InferenceEngine):
            variant = "echo"

            async def load(self) -> None:
                pass

            async def run_inference(self, text, src_code, tgt_code):
                return text
    """

    #: Short name used in logs and status output ("cuda", "cpu", "llm", ...)
    variant: str = "engine"

    @abstractmethod
    async def load(self) -> None:
        """
        Acquire backend resources.

        Raises:
            EngineLoadError (or any exception): the engine is unusable
        """
        pass

    @abstractmethod
    async def run_inference(self, text: str, src_code: str, tgt_code: str) -> str:
        """Translate ``text`` between two engine codes."""
        pass

    async def close(self) -> None:
        """Release resources. Override if the backend holds any."""
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(variant={self.variant})>"
