"""Quality values accepted by each model family."""

from __future__ import annotations

from typing import Dict, Tuple

from image_agent.media.model_detection import ModelType
from image_agent.media.errors import InvalidQualityError


QUALITY_VALUES: Dict[ModelType, Tuple[str, ...]] = {
    ModelType.FLUX: ("standard", "hd"),
    ModelType.GPT_IMAGE_1: ("low", "medium", "high"),
}


def validate_quality(quality: str, model_type: ModelType) -> None:
    allowed = QUALITY_VALUES.get(model_type)
    if allowed is None:
        return
    if quality not in allowed:
        choices = ", ".join(f'"{value}"' for value in allowed)
        raise InvalidQualityError(f"{model_type.value} quality must be one of {choices}, got '{quality}'")
