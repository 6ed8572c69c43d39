"""Image generation provider integrations."""

from image_agent.media.errors import ImageProviderError
from image_agent.media.providers.azure_provider import AzureOpenAIProvider, AzureProviderConfig
from image_agent.media.providers.base import GenerationOptions, GenerationResult, ImageProvider
from image_agent.media.providers.factory import create_image_provider
from image_agent.media.providers.google_provider import GoogleNanoBananaProvider, GoogleProviderConfig

__all__ = [
    "AzureOpenAIProvider",
    "AzureProviderConfig",
    "GenerationOptions",
    "GenerationResult",
    "GoogleNanoBananaProvider",
    "GoogleProviderConfig",
    "ImageProvider",
    "ImageProviderError",
    "create_image_provider",
]
