"""Request helpers layered on top of the image providers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from image_agent.core.logger import get_logger
from image_agent.media.output import GENERATED_IMAGES_DIRNAME
from image_agent.media.prompts import build_ui_prompt
from image_agent.media.providers.base import (
    GenerationOptions,
    GenerationResult,
    ImageProvider,
    require_prompt,
)


logger = get_logger("image_agent.media.service")

UI_MIN_DESCRIPTION_LENGTH = 20
IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg")


@dataclass(frozen=True)
class GeneratedImageInfo:
    name: str
    path: Path
    size_bytes: int
    created_at: datetime


def generate_ui_image(
    provider: ImageProvider,
    description: str,
    *,
    style: str = "modern",
    ui_type: str = "web app",
    size: str = "portrait",
    working_directory: Optional[Union[str, Path]] = None,
) -> GenerationResult:
    """Generate an app or website mockup from a plain description.

    The description itself must be at least 20 characters; the expanded
    prompt sent to the provider is always longer than that.
    """

    description = require_prompt(description, minimum=UI_MIN_DESCRIPTION_LENGTH, field="description")
    prompt = build_ui_prompt(description, style=style, ui_type=ui_type)
    logger.info("ui_image_requested", provider=provider.get_name(), ui_type=ui_type, style=style)
    return provider.generate_image(
        prompt,
        GenerationOptions(
            quality="standard",
            size=size,
            output_format="png",
            output_compression=100,
            working_directory=working_directory,
        ),
    )


def images_directory(provider: ImageProvider, working_directory: Optional[Union[str, Path]] = None) -> Path:
    if working_directory:
        return Path(working_directory).expanduser().resolve() / GENERATED_IMAGES_DIRNAME
    return provider.output_dir


def list_generated_images(directory: Union[str, Path]) -> List[GeneratedImageInfo]:
    """Return saved images in ``directory``, newest first."""

    root = Path(directory)
    root.mkdir(parents=True, exist_ok=True)
    images = []
    for entry in root.iterdir():
        if not entry.is_file() or entry.suffix.lower() not in IMAGE_EXTENSIONS:
            continue
        stat = entry.stat()
        images.append(
            GeneratedImageInfo(
                name=entry.name,
                path=entry.resolve(),
                size_bytes=stat.st_size,
                created_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            )
        )
    return sorted(images, key=lambda item: (item.created_at, item.name), reverse=True)


def relative_image_path(result: GenerationResult, working_directory: Optional[Union[str, Path]] = None) -> str:
    base = Path(working_directory or Path.cwd()).expanduser().resolve()
    try:
        return result.path.relative_to(base).as_posix()
    except ValueError:
        return str(result.path)
