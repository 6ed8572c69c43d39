"""Central runtime configuration for image_agent."""

from __future__ import annotations

from functools import lru_cache
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    log_level: str = "INFO"
    app_name: str = "image_agent"
    app_version: str = "0.1.0"
    image_provider: str = "google"
    output_dir: str = "generated-images"
    image_timeout_seconds: int = 120
    gemini_api_key: str = ""
    gemini_image_model: str = "gemini-2.0-flash-exp"
    gemini_api_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    azure_openai_endpoint: str = ""
    azure_openai_api_key: str = ""
    azure_openai_deployment: str = "flux-1-1-pro"
    azure_openai_api_version: str = "2025-04-01-preview"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def _validate(settings: Settings) -> Settings:
    if settings.image_timeout_seconds <= 0:
        raise ValueError("IMAGE_TIMEOUT_SECONDS must be positive.")
    if not isinstance(logging.getLevelName(settings.log_level.upper()), int):
        raise ValueError(f"LOG_LEVEL '{settings.log_level}' is not a known logging level.")
    if not settings.output_dir.strip():
        raise ValueError("OUTPUT_DIR must not be empty.")
    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return validated settings as a cached singleton."""

    return _validate(Settings())
