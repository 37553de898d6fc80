"""
Application configuration.

Loads settings from environment variables (prefixed ``ANUVAD_``) with
sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="ANUVAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # Environment
    # ==========================================================================

    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # ==========================================================================
    # API Server
    # ==========================================================================

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # ==========================================================================
    # Translation
    # ==========================================================================

    # Language the content is authored in
    source_language: str = "en"

    # "nllb" (local transformers model) or "llm" (DSPy)
    engine_backend: str = "nllb"
    model_name: str = "facebook/nllb-200-distilled-600M"
    prefer_hardware: bool = True
    max_length: int = 512
    inference_timeout: float | None = None

    # Start loading the model when the API boots instead of on first request
    preload_model: bool = True

    # Override for the packaged static UI strings
    static_strings_path: str = ""

    # ==========================================================================
    # LLM backend
    # ==========================================================================

    llm_provider: str = "gemini"
    llm_model: str = ""
    llm_api_key: str = ""

    # ==========================================================================
    # Optional Services
    # ==========================================================================

    sentry_dsn: str = ""

    # ==========================================================================
    # Helpers
    # ==========================================================================

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
