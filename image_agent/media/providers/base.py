"""Provider contracts for image generation backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from image_agent.media.errors import PromptRequiredError, PromptTooShortError
from image_agent.media.model_detection import ModelType
from image_agent.media.output import OutputLocation, random_suffix, resolve_output_location, utc_now


DEFAULT_MIN_PROMPT_LENGTH = 10


@dataclass(frozen=True)
class GenerationOptions:
    quality: str = "standard"
    size: str = "medium"
    output_format: str = "png"
    output_compression: int = 100
    filename: Optional[str] = None
    working_directory: Optional[Union[str, Path]] = None


@dataclass(frozen=True)
class GenerationResult:
    path: Path
    url: str
    base64: str
    mime_type: str
    prompt: str
    size: str
    quality: str
    provider: str
    model_type: Optional[ModelType] = None


def require_prompt(prompt: Optional[str], *, minimum: int, field: str = "prompt") -> str:
    if not prompt:
        raise PromptRequiredError(f"{field} is required")
    if len(prompt) < minimum:
        raise PromptTooShortError(
            f"{field} should be detailed and descriptive (at least {minimum} characters)"
        )
    return prompt


class ImageProvider(ABC):
    """Common surface of every text-to-image backend.

    Subclasses validate their configuration when constructed, so a provider
    instance that exists is ready to generate. ``generate_image`` either
    returns a result for a file already written to disk or raises; nothing is
    retried and no partial result is returned.
    """

    provider_name: str = "abstract"
    min_prompt_length: int = DEFAULT_MIN_PROMPT_LENGTH

    def __init__(
        self,
        *,
        output_dir: Union[str, Path],
        clock: Optional[Callable[[], datetime]] = None,
        suffix_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self._output_dir = Path(output_dir).expanduser().resolve()
        self._clock = clock or utc_now
        self._suffix_factory = suffix_factory or random_suffix

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def get_name(self) -> str:
        return self.provider_name

    @abstractmethod
    def validate(self) -> None:
        """Raise ConfigurationIncompleteError when required settings are missing."""

    @abstractmethod
    def generate_image(self, prompt: str, options: Optional[GenerationOptions] = None) -> GenerationResult:
        raise NotImplementedError

    def _require_prompt(self, prompt: Optional[str]) -> str:
        return require_prompt(prompt, minimum=self.min_prompt_length)

    def _output_location(
        self,
        options: GenerationOptions,
        *,
        provider_tag: str,
        model_tag: str,
        output_format: str,
    ) -> OutputLocation:
        return resolve_output_location(
            custom_filename=options.filename,
            working_directory=options.working_directory,
            provider_tag=provider_tag,
            model_tag=model_tag,
            default_directory=self._output_dir,
            output_format=output_format,
            clock=self._clock,
            suffix_factory=self._suffix_factory,
        )
