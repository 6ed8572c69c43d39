import pytest

from image_agent.media.errors import InvalidSizeFormatError, SizeNotAlignedError, SizeOutOfBoundsError
from image_agent.media.model_detection import ModelType
from image_agent.media.sizing import SIZE_SHORTHANDS, PixelSize, resolve_size


EXPECTED_SHORTHANDS = {
    "small": PixelSize(512, 512),
    "medium": PixelSize(1024, 1024),
    "large": PixelSize(1440, 1440),
    "square": PixelSize(1024, 1024),
    "portrait": PixelSize(1024, 1440),
    "landscape": PixelSize(1440, 1024),
}


def test_shorthands_expand_to_fixed_sizes_for_every_model() -> None:
    assert set(SIZE_SHORTHANDS) == set(EXPECTED_SHORTHANDS)
    for model_type in ModelType:
        for token, expected in EXPECTED_SHORTHANDS.items():
            assert resolve_size(token, model_type) == expected


def test_shorthand_keys_are_case_sensitive() -> None:
    with pytest.raises(InvalidSizeFormatError):
        resolve_size("Portrait", ModelType.FLUX)


def test_pixel_size_renders_as_wxh() -> None:
    assert str(resolve_size("portrait", ModelType.FLUX)) == "1024x1440"


@pytest.mark.parametrize(
    "token",
    ["1024", "1024x", "x1024", "1024X1024", "1024 x 1024", "-512x512", "huge", "", "1024x1024\n", "\uff11\uff10\uff12\uff14x1024"],
)
def test_rejects_malformed_tokens(token: str) -> None:
    with pytest.raises(InvalidSizeFormatError):
        resolve_size(token, ModelType.GPT_IMAGE_1)


def test_flux_accepts_aligned_sizes_within_bounds_unchanged() -> None:
    for width in range(256, 1441, 32):
        for height in (256, 768, 1440):
            assert resolve_size(f"{width}x{height}", ModelType.FLUX) == PixelSize(width, height)


@pytest.mark.parametrize("token", ["224x1024", "1024x224", "1472x1024", "1024x1472", "0x0", "2048x2048"])
def test_flux_rejects_sizes_out_of_bounds(token: str) -> None:
    with pytest.raises(SizeOutOfBoundsError):
        resolve_size(token, ModelType.FLUX)


@pytest.mark.parametrize("token", ["1000x1024", "1024x1000", "257x256", "1439x1440"])
def test_flux_rejects_unaligned_sizes(token: str) -> None:
    with pytest.raises(SizeNotAlignedError):
        resolve_size(token, ModelType.FLUX)


def test_gpt_image_skips_flux_constraints() -> None:
    assert resolve_size("1536x1024", ModelType.GPT_IMAGE_1) == PixelSize(1536, 1024)
    assert resolve_size("1000x100", ModelType.GPT_IMAGE_1) == PixelSize(1000, 100)


def test_zero_dimensions_are_rejected_for_every_model() -> None:
    for model_type in ModelType:
        with pytest.raises(SizeOutOfBoundsError):
            resolve_size("0x1024", model_type)
        with pytest.raises(SizeOutOfBoundsError):
            resolve_size("1024x0", model_type)
