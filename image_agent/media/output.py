"""Output directory and filename resolution for generated images."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
import secrets
import string
from typing import Callable, Optional, Union


GENERATED_IMAGES_DIRNAME = "generated-images"
SUFFIX_LENGTH = 6
_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits

PathLike = Union[str, Path]
Clock = Callable[[], datetime]
SuffixFactory = Callable[[], str]


@dataclass(frozen=True)
class OutputLocation:
    directory: Path
    filename: str

    @property
    def path(self) -> Path:
        return self.directory / self.filename


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def random_suffix() -> str:
    return "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))


def resolve_output_directory(working_directory: Optional[PathLike], default_directory: PathLike) -> Path:
    if working_directory:
        directory = Path(working_directory) / GENERATED_IMAGES_DIRNAME
    else:
        directory = Path(default_directory)
    directory = directory.expanduser().resolve()
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def build_filename(
    *,
    custom_filename: Optional[str],
    provider_tag: str,
    model_tag: str,
    output_format: str,
    clock: Clock = utc_now,
    suffix_factory: SuffixFactory = random_suffix,
) -> str:
    if custom_filename:
        return f"{custom_filename}.{output_format}"
    date_stamp = clock().date().isoformat()
    return f"{provider_tag}-{model_tag}-{date_stamp}-{suffix_factory()}.{output_format}"


def resolve_output_location(
    *,
    custom_filename: Optional[str],
    working_directory: Optional[PathLike],
    provider_tag: str,
    model_tag: str,
    default_directory: PathLike,
    output_format: str = "png",
    clock: Clock = utc_now,
    suffix_factory: SuffixFactory = random_suffix,
) -> OutputLocation:
    """Pick the directory and filename a generated image is saved under.

    A ``working_directory`` wins over the provider's default directory and
    gets a ``generated-images`` subfolder. The directory is created if it does
    not exist yet. Without a custom filename the name embeds the provider and
    model tags, the UTC date and a short random suffix; the suffix makes
    collisions unlikely but does not rule them out.
    """

    directory = resolve_output_directory(working_directory, default_directory)
    filename = build_filename(
        custom_filename=custom_filename,
        provider_tag=provider_tag,
        model_tag=model_tag,
        output_format=output_format,
        clock=clock,
        suffix_factory=suffix_factory,
    )
    return OutputLocation(directory=directory, filename=filename)


def write_image(base64_data: str, location: OutputLocation) -> Path:
    full_path = location.path
    full_path.write_bytes(base64.b64decode(base64_data))
    return full_path
