"""Model family detection from free-text deployment identifiers."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ModelType(str, Enum):
    FLUX = "flux"
    GPT_IMAGE_1 = "gpt-image-1"

    def __str__(self) -> str:
        return self.value


def detect_model_type(identifier: Optional[str]) -> ModelType:
    """Infer the model family of a deployment or model id.

    Unrecognized identifiers fall back to flux; detection never raises.
    """

    normalized = (identifier or "").lower()
    if "flux" in normalized:
        return ModelType.FLUX
    if "gpt-image" in normalized:
        return ModelType.GPT_IMAGE_1
    return ModelType.FLUX
