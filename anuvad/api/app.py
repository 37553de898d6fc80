"""
FastAPI application exposing the translation runtime over HTTP.

Frontends that can't run the model themselves call these endpoints; the
semantics are the same as a local TranslationSession.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from anuvad.config import get_settings
from anuvad.i18n.languages import (
    SUPPORTED_LANGUAGES,
    UnsupportedLanguageError,
    get_language_name,
)
from anuvad.i18n.session import TranslationSession
from anuvad.integrations.sentry import init_sentry
from anuvad.runtime import TranslationRuntime, create_runtime

logger = logging.getLogger(__name__)


# =============================================================================
# App State
# =============================================================================


class AppState:
    """Application state - initialized at startup."""

    runtime: TranslationRuntime
    preload: asyncio.Task | None = None


state = AppState()


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup app resources."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    init_sentry(settings)

    state.runtime = create_runtime(settings)
    if settings.preload_model:
        state.preload = asyncio.create_task(state.runtime.initialize())

    logger.info(f"Anuvad API starting in {settings.environment} mode")

    yield

    if state.preload is not None and not state.preload.done():
        state.preload.cancel()
    await state.runtime.close()
    logger.info("Anuvad API shutting down")


# =============================================================================
# App Setup
# =============================================================================


app = FastAPI(
    title="Anuvad API",
    description="On-demand translation for dish and nutrition content",
    version="0.1.0",
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Dependencies
# =============================================================================


def get_runtime() -> TranslationRuntime:
    return state.runtime


def open_session(
    runtime: TranslationRuntime,
    target_language: str,
    source_language: str,
) -> TranslationSession:
    try:
        return runtime.session(target_language, source=source_language)
    except UnsupportedLanguageError as e:
        raise HTTPException(status_code=400, detail=str(e))


# =============================================================================
# Request/Response Models
# =============================================================================


class TranslateRequest(BaseModel):
    text: str
    target_language: str
    source_language: str = "en"
    skip_cache: bool = False


class TranslateBatchRequest(BaseModel):
    texts: list[str] = Field(default_factory=list)
    target_language: str
    source_language: str = "en"


# =============================================================================
# Translation
# =============================================================================


@app.post("/translate")
async def translate_text(
    request: TranslateRequest,
    runtime: TranslationRuntime = Depends(get_runtime),
):
    """
    Translate text to target language.

    Never fails because of the model: if translation is impossible the
    original text comes back as ``translated``.
    """
    session = open_session(runtime, request.target_language, request.source_language)

    translated = await session.translate(request.text, skip_cache=request.skip_cache)

    return {
        "original": request.text,
        "translated": translated,
        "source_language": session.source_language.value,
        "target_language": session.current_language.value,
    }


@app.post("/translate/batch")
async def translate_batch(
    request: TranslateBatchRequest,
    runtime: TranslationRuntime = Depends(get_runtime),
):
    """Translate many texts; the response preserves request order."""
    session = open_session(runtime, request.target_language, request.source_language)

    translations = await session.translate_batch(request.texts)

    return {
        "translations": translations,
        "source_language": session.source_language.value,
        "target_language": session.current_language.value,
    }


@app.get("/static/{language}")
async def static_lookup(
    language: str,
    key: str,
    runtime: TranslationRuntime = Depends(get_runtime),
):
    """Curated UI string for ``key``; unknown keys echo back."""
    session = open_session(runtime, language, runtime.source_language.value)
    return {"key": key, "text": session.static_lookup(key)}


# =============================================================================
# Status
# =============================================================================


@app.get("/status")
async def status(runtime: TranslationRuntime = Depends(get_runtime)):
    loader = runtime.loader
    return {
        "state": loader.state.value,
        "is_initialized": loader.is_settled,
        "variant": loader.variant,
        "cached_entries": len(runtime.cache),
    }


@app.get("/languages")
async def list_languages():
    """List all supported languages for translation."""
    return {
        "languages": [
            {
                "code": lang.value,
                "name": get_language_name(lang),
                "engine_code": lang.engine_code,
            }
            for lang in SUPPORTED_LANGUAGES
        ]
    }


def serve() -> None:
    """Run the API with uvicorn using configured host and port."""
    import uvicorn

    uvicorn.run(
        "anuvad.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
