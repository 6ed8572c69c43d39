"""Google Nano Banana (Gemini image) generation provider."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple, Union

import httpx

from image_agent.core.logger import get_logger, truncate_prompt
from image_agent.media.errors import (
    ConfigurationIncompleteError,
    NoImageDataError,
    RemoteCallFailedError,
)
from image_agent.media.output import write_image
from image_agent.media.providers.base import GenerationOptions, GenerationResult, ImageProvider


logger = get_logger("image_agent.media.providers.google")

DEFAULT_GEMINI_MODEL = "gemini-2.0-flash-exp"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

# Gemini picks size and quality itself.
AUTO_SIZE = "auto"
DEFAULT_QUALITY = "standard"


@dataclass(frozen=True)
class GoogleProviderConfig:
    api_key: str
    model: str = DEFAULT_GEMINI_MODEL
    base_url: str = DEFAULT_GEMINI_BASE_URL
    output_dir: Union[str, Path] = "generated-images"
    timeout_seconds: int = 120


def _failure(detail: str) -> str:
    return f"Google Nano Banana image generation failed: {detail}"


def _extension_for(mime_type: str) -> str:
    subtype = mime_type.split("/", 1)[1] if "/" in mime_type else ""
    return subtype.strip().lower() or "png"


def _first_inline_image(body: Dict[str, Any]) -> Optional[Tuple[str, str]]:
    candidates = body.get("candidates")
    if not isinstance(candidates, list):
        return None
    for candidate in candidates:
        if not isinstance(candidate, dict):
            continue
        content = candidate.get("content")
        if not isinstance(content, dict):
            continue
        parts = content.get("parts")
        if not isinstance(parts, list):
            continue
        for part in parts:
            if not isinstance(part, dict):
                continue
            inline_data = part.get("inlineData") or part.get("inline_data")
            if isinstance(inline_data, dict) and inline_data.get("data"):
                mime_type = str(inline_data.get("mimeType") or inline_data.get("mime_type") or "image/png")
                return str(inline_data["data"]).strip(), mime_type
    return None


class GoogleNanoBananaProvider(ImageProvider):
    provider_name = "google-nano-banana"

    def __init__(
        self,
        config: GoogleProviderConfig,
        *,
        client: Optional[httpx.Client] = None,
        clock: Optional[Callable[[], datetime]] = None,
        suffix_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        if not (config.api_key or "").strip():
            raise ConfigurationIncompleteError("Google Gemini", ["apiKey (GEMINI_API_KEY)"])
        super().__init__(output_dir=config.output_dir, clock=clock, suffix_factory=suffix_factory)
        self._config = config
        self._base_url = config.base_url.rstrip("/")
        self._timeout_seconds = max(1, config.timeout_seconds)
        self._client = client

    @property
    def config(self) -> GoogleProviderConfig:
        return self._config

    def validate(self) -> None:
        if not (self._config.api_key or "").strip():
            raise ConfigurationIncompleteError("Google Gemini", ["apiKey (GEMINI_API_KEY)"])

    def _endpoint(self) -> str:
        model = self._config.model.strip()
        return f"{self._base_url}/models/{model}:generateContent?key={self._config.api_key.strip()}"

    def _post(self, request_body: Dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return self._client.post(self._endpoint(), json=request_body)
        with httpx.Client(timeout=self._timeout_seconds) as client:
            return client.post(self._endpoint(), json=request_body)

    def _request_image(self, prompt: str) -> Tuple[str, str]:
        request_body = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseModalities": ["TEXT", "IMAGE"],
            },
        }

        try:
            response = self._post(request_body)
        except httpx.HTTPError as exc:
            raise RemoteCallFailedError(_failure(str(exc))) from exc

        if response.status_code < 200 or response.status_code >= 300:
            detail = response.text.strip()
            if len(detail) > 240:
                detail = detail[:240] + "..."
            raise RemoteCallFailedError(
                _failure(f"status={response.status_code} detail={detail}"),
                status_code=response.status_code,
            )

        try:
            body: Dict[str, Any] = response.json()
        except ValueError as exc:
            raise RemoteCallFailedError(_failure("invalid JSON response")) from exc

        image = _first_inline_image(body) if isinstance(body, dict) else None
        if image is None:
            raise NoImageDataError(_failure("Gemini did not return an image"))
        return image

    def generate_image(self, prompt: str, options: Optional[GenerationOptions] = None) -> GenerationResult:
        options = options or GenerationOptions()
        prompt = self._require_prompt(prompt)

        logger.info(
            "image_generation_started",
            provider=self.provider_name,
            model=self._config.model,
            prompt=truncate_prompt(prompt),
        )

        try:
            image_data, mime_type = self._request_image(prompt)
        except (RemoteCallFailedError, NoImageDataError) as exc:
            logger.error(
                "image_generation_failed",
                provider=self.provider_name,
                status=getattr(exc, "status_code", None),
                message=str(exc),
            )
            raise

        logger.info("image_generation_succeeded", provider=self.provider_name, mime_type=mime_type)

        location = self._output_location(
            options,
            provider_tag="google",
            model_tag="nano-banana",
            output_format=_extension_for(mime_type),
        )
        file_path = write_image(image_data, location)
        logger.info("image_saved", provider=self.provider_name, path=str(file_path))

        return GenerationResult(
            path=file_path,
            url=file_path.as_uri(),
            base64=image_data,
            mime_type=mime_type,
            prompt=prompt,
            size=AUTO_SIZE,
            quality=DEFAULT_QUALITY,
            provider=self.provider_name,
        )
