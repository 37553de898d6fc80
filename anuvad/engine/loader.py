"""
Model loader.

Owns the lifecycle of the one inference engine a runtime uses:

    uninitialized -> initializing -> ready
                                  -> failed   (terminal, never retried)

Candidates are tried in order (accelerator first, CPU after). Concurrent
``initialize()`` calls all await the same load task.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Sequence

from anuvad.engine.base import InferenceEngine
from anuvad.integrations.sentry import capture_exception

logger = logging.getLogger(__name__)


class ModelState(str, Enum):
    """Lifecycle state of the model loader."""

    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"
    FAILED = "failed"


class ModelLoader:
    """
    Acquires exactly one inference engine from an ordered candidate list.

    Usage:
        loader = ModelLoader([NLLBEngine(device="auto"), NLLBEngine(device="cpu")])

        state = await loader.initialize()
        if state == ModelState.READY:
            await loader.engine.run_inference(...)
    """

    def __init__(self, candidates: Sequence[InferenceEngine]):
        self._candidates = list(candidates)
        self._state = ModelState.UNINITIALIZED
        self._engine: InferenceEngine | None = None
        self._task: asyncio.Task[None] | None = None
        self._errors: list[tuple[str, BaseException]] = []

    # =========================================================================
    # State
    # =========================================================================

    @property
    def state(self) -> ModelState:
        return self._state

    @property
    def engine(self) -> InferenceEngine | None:
        """The loaded engine, or None unless ready."""
        return self._engine

    @property
    def variant(self) -> str | None:
        return self._engine.variant if self._engine else None

    @property
    def is_ready(self) -> bool:
        return self._state == ModelState.READY

    @property
    def is_settled(self) -> bool:
        """Whether initialization has finished, successfully or not."""
        return self._state in (ModelState.READY, ModelState.FAILED)

    @property
    def errors(self) -> list[tuple[str, BaseException]]:
        """Load errors per candidate variant, in attempt order."""
        return list(self._errors)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def initialize(self) -> ModelState:
        """
        Load an engine if that hasn't happened yet.

        Idempotent. Callers arriving while a load is in flight wait for
        that load; callers arriving after it settled return at once.
        """
        if self.is_settled:
            return self._state

        if self._task is None:
            self._state = ModelState.INITIALIZING
            self._task = asyncio.ensure_future(self._load())

        # A cancelled waiter must not cancel the shared load
        await asyncio.shield(self._task)
        return self._state

    async def _load(self) -> None:
        for candidate in self._candidates:
            try:
                await candidate.load()
            except Exception as e:
                logger.warning(f"Engine '{candidate.variant}' failed to load: {e}")
                self._errors.append((candidate.variant, e))
                continue

            self._engine = candidate
            self._state = ModelState.READY
            logger.info(f"Translation engine ready ({candidate.variant})")
            return

        self._state = ModelState.FAILED
        tried = ", ".join(variant for variant, _ in self._errors) or "none"
        logger.error(
            f"Translation engine initialization failed (tried: {tried}); "
            "translations will pass through unchanged"
        )
        if self._errors:
            capture_exception(self._errors[-1][1], tried=tried)

    async def close(self) -> None:
        """Release the loaded engine, if any."""
        if self._engine is not None:
            await self._engine.close()

    def __repr__(self) -> str:
        return f"<ModelLoader(state={self._state.value}, variant={self.variant})>"
