"""Azure OpenAI image generation provider (Flux and gpt-image-1 deployments)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import httpx

from image_agent.core.logger import get_logger, truncate_prompt
from image_agent.media.errors import (
    ConfigurationIncompleteError,
    InvalidOutputCompressionError,
    NoImageDataError,
    RemoteCallFailedError,
)
from image_agent.media.model_detection import ModelType, detect_model_type
from image_agent.media.output import write_image
from image_agent.media.providers.base import GenerationOptions, GenerationResult, ImageProvider
from image_agent.media.quality import validate_quality
from image_agent.media.sizing import resolve_size


logger = get_logger("image_agent.media.providers.azure")


@dataclass(frozen=True)
class AzureProviderConfig:
    endpoint: str
    api_key: str
    deployment: str
    api_version: str
    output_dir: Union[str, Path] = "generated-images"
    timeout_seconds: int = 120


def _missing_fields(config: AzureProviderConfig) -> list[str]:
    required = {
        "endpoint (AZURE_OPENAI_ENDPOINT)": config.endpoint,
        "apiKey (AZURE_OPENAI_API_KEY)": config.api_key,
        "deployment (AZURE_OPENAI_DEPLOYMENT)": config.deployment,
        "apiVersion (AZURE_OPENAI_API_VERSION)": config.api_version,
    }
    return [name for name, value in required.items() if not str(value or "").strip()]


def build_generations_url(endpoint: str, deployment: str, api_version: str) -> str:
    base = endpoint.strip().rstrip("/")
    return f"{base}/openai/deployments/{deployment.strip()}/images/generations?api-version={api_version.strip()}"


def _upstream_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return response.text.strip() or response.reason_phrase


class AzureOpenAIProvider(ImageProvider):
    provider_name = "azure-openai"

    def __init__(
        self,
        config: AzureProviderConfig,
        *,
        client: Optional[httpx.Client] = None,
        clock: Optional[Callable[[], datetime]] = None,
        suffix_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        missing = _missing_fields(config)
        if missing:
            raise ConfigurationIncompleteError("Azure OpenAI", missing)
        super().__init__(output_dir=config.output_dir, clock=clock, suffix_factory=suffix_factory)
        self._config = config
        self._timeout_seconds = max(1, config.timeout_seconds)
        self._client = client

    @property
    def config(self) -> AzureProviderConfig:
        return self._config

    @property
    def model_type(self) -> ModelType:
        return detect_model_type(self._config.deployment)

    @property
    def api_url(self) -> str:
        return build_generations_url(self._config.endpoint, self._config.deployment, self._config.api_version)

    def validate(self) -> None:
        missing = _missing_fields(self._config)
        if missing:
            raise ConfigurationIncompleteError("Azure OpenAI", missing)

    def _headers(self) -> Dict[str, str]:
        return {
            "api-key": self._config.api_key.strip(),
            "Content-Type": "application/json",
        }

    def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return self._client.post(self.api_url, headers=self._headers(), json=payload)
        with httpx.Client(timeout=self._timeout_seconds) as client:
            return client.post(self.api_url, headers=self._headers(), json=payload)

    def generate_image(self, prompt: str, options: Optional[GenerationOptions] = None) -> GenerationResult:
        options = options or GenerationOptions()
        prompt = self._require_prompt(prompt)
        model_type = self.model_type

        validate_quality(options.quality, model_type)
        pixel_size = resolve_size(options.size, model_type)
        if not 0 <= options.output_compression <= 100:
            raise InvalidOutputCompressionError(
                f"output_compression must be between 0 and 100, got {options.output_compression}"
            )

        payload = {
            "prompt": prompt,
            "n": 1,
            "size": str(pixel_size),
            "output_format": options.output_format,
            "quality": options.quality,
            "output_compression": options.output_compression,
        }

        logger.info(
            "image_generation_started",
            provider=self.provider_name,
            model_type=model_type.value,
            deployment=self._config.deployment,
            size=str(pixel_size),
            quality=options.quality,
            prompt=truncate_prompt(prompt),
        )

        try:
            response = self._post(payload)
        except httpx.HTTPError as exc:
            logger.error("image_generation_failed", provider=self.provider_name, status=None, message=str(exc))
            raise RemoteCallFailedError(f"Azure OpenAI request failed: {exc}") from exc

        if response.status_code < 200 or response.status_code >= 300:
            message = _upstream_message(response)
            logger.error(
                "image_generation_failed",
                provider=self.provider_name,
                status=response.status_code,
                message=message,
            )
            raise RemoteCallFailedError(message, status_code=response.status_code)

        try:
            body: Dict[str, Any] = response.json()
        except ValueError as exc:
            raise NoImageDataError("No image data in response") from exc

        data = body.get("data") if isinstance(body, dict) else None
        first = data[0] if isinstance(data, list) and data else None
        b64 = first.get("b64_json") if isinstance(first, dict) else None
        if not b64:
            logger.error(
                "image_generation_failed",
                provider=self.provider_name,
                status=response.status_code,
                message="no_image_data",
            )
            raise NoImageDataError("No image data in response")

        logger.info("image_generation_succeeded", provider=self.provider_name, model_type=model_type.value)

        location = self._output_location(
            options,
            provider_tag="azure",
            model_tag=model_type.value,
            output_format=options.output_format,
        )
        file_path = write_image(b64, location)
        logger.info("image_saved", provider=self.provider_name, path=str(file_path))

        return GenerationResult(
            path=file_path,
            url=file_path.as_uri(),
            base64=b64,
            mime_type=f"image/{options.output_format}",
            prompt=prompt,
            size=str(pixel_size),
            quality=options.quality,
            provider=self.provider_name,
            model_type=model_type,
        )
