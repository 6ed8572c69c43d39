"""Factory to build the configured image provider."""

from __future__ import annotations

from typing import Optional

import httpx

from image_agent.core.config import Settings
from image_agent.core.logger import get_logger
from image_agent.media.errors import UnknownProviderError
from image_agent.media.providers.azure_provider import AzureOpenAIProvider, AzureProviderConfig
from image_agent.media.providers.base import ImageProvider
from image_agent.media.providers.google_provider import GoogleNanoBananaProvider, GoogleProviderConfig


logger = get_logger("image_agent.media.providers.factory")

SUPPORTED_PROVIDERS = ("azure", "google")
DEFAULT_PROVIDER = "google"


def create_image_provider(settings: Settings, *, client: Optional[httpx.Client] = None) -> ImageProvider:
    """Build a provider from an explicit settings value.

    Each call constructs a fresh provider; nothing is cached at module level.
    """

    provider = (settings.image_provider or "").strip().lower() or DEFAULT_PROVIDER

    if provider == "google":
        instance: ImageProvider = GoogleNanoBananaProvider(
            GoogleProviderConfig(
                api_key=settings.gemini_api_key,
                model=settings.gemini_image_model,
                base_url=settings.gemini_api_base_url,
                output_dir=settings.output_dir,
                timeout_seconds=settings.image_timeout_seconds,
            ),
            client=client,
        )
    elif provider == "azure":
        instance = AzureOpenAIProvider(
            AzureProviderConfig(
                endpoint=settings.azure_openai_endpoint,
                api_key=settings.azure_openai_api_key,
                deployment=settings.azure_openai_deployment,
                api_version=settings.azure_openai_api_version,
                output_dir=settings.output_dir,
                timeout_seconds=settings.image_timeout_seconds,
            ),
            client=client,
        )
    else:
        raise UnknownProviderError(
            f"Unknown provider: {settings.image_provider}. Supported: {', '.join(SUPPORTED_PROVIDERS)}"
        )

    logger.info("image_provider_created", provider=instance.get_name(), output_dir=str(instance.output_dir))
    return instance
