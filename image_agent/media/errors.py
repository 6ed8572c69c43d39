"""Error taxonomy for image generation requests."""

from __future__ import annotations

from typing import Optional


class ImageProviderError(RuntimeError):
    """Raised when an image provider cannot fulfill a generation request."""


class ImageRequestValidationError(ImageProviderError, ValueError):
    """Local validation failure raised before any remote call."""


class ConfigurationIncompleteError(ImageRequestValidationError):
    def __init__(self, provider: str, missing: list[str]) -> None:
        self.provider = provider
        self.missing = list(missing)
        lines = "\n".join(f"  - {field} is required" for field in self.missing)
        super().__init__(f"{provider} configuration is incomplete:\n{lines}")


class PromptRequiredError(ImageRequestValidationError):
    pass


class PromptTooShortError(ImageRequestValidationError):
    pass


class InvalidSizeFormatError(ImageRequestValidationError):
    pass


class SizeOutOfBoundsError(ImageRequestValidationError):
    pass


class SizeNotAlignedError(ImageRequestValidationError):
    pass


class InvalidQualityError(ImageRequestValidationError):
    pass


class InvalidOutputCompressionError(ImageRequestValidationError):
    pass


class UnknownProviderError(ImageRequestValidationError):
    pass


class RemoteCallFailedError(ImageProviderError):
    """The upstream service rejected the request or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class NoImageDataError(ImageProviderError):
    """The upstream call succeeded but carried no image payload."""
