"""Size shorthand expansion and per-model pixel constraints."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Dict

from image_agent.media.model_detection import ModelType
from image_agent.media.errors import (
    InvalidSizeFormatError,
    SizeNotAlignedError,
    SizeOutOfBoundsError,
)


SIZE_SHORTHANDS: Dict[str, str] = {
    "small": "512x512",
    "medium": "1024x1024",
    "large": "1440x1440",
    "square": "1024x1024",
    "portrait": "1024x1440",
    "landscape": "1440x1024",
}

FLUX_MIN_DIMENSION = 256
FLUX_MAX_DIMENSION = 1440
FLUX_DIMENSION_STEP = 32

_SIZE_PATTERN = re.compile(r"([0-9]+)x([0-9]+)")


@dataclass(frozen=True)
class PixelSize:
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise SizeOutOfBoundsError(f"Size dimensions must be positive, got {self}")

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


def _check_flux_size(size: PixelSize) -> None:
    for value in (size.width, size.height):
        if value < FLUX_MIN_DIMENSION or value > FLUX_MAX_DIMENSION:
            raise SizeOutOfBoundsError(
                f"Flux size must be between {FLUX_MIN_DIMENSION}x{FLUX_MIN_DIMENSION} "
                f"and {FLUX_MAX_DIMENSION}x{FLUX_MAX_DIMENSION}, got {size}"
            )
    for value in (size.width, size.height):
        if value % FLUX_DIMENSION_STEP != 0:
            raise SizeNotAlignedError(
                f"Flux size dimensions must be multiples of {FLUX_DIMENSION_STEP}, got {size}"
            )


def resolve_size(token: str, model_type: ModelType) -> PixelSize:
    """Expand a shorthand or WxH token and enforce the model's pixel limits."""

    expanded = SIZE_SHORTHANDS.get(token, token)
    match = _SIZE_PATTERN.fullmatch(expanded or "")
    if match is None:
        shorthands = ", ".join(SIZE_SHORTHANDS)
        raise InvalidSizeFormatError(
            f"Size must be a shorthand ({shorthands}) or WxH format (e.g., 1024x1024), got '{token}'"
        )

    size = PixelSize(width=int(match.group(1)), height=int(match.group(2)))
    if model_type == ModelType.FLUX:
        _check_flux_size(size)
    return size
