import os

import pytest

from image_agent.media.errors import PromptRequiredError, PromptTooShortError
from image_agent.media.prompts import UI_STYLE_DESCRIPTIONS, UI_TYPE_DESCRIPTIONS, build_ui_prompt
from image_agent.media.providers.azure_provider import AzureOpenAIProvider, AzureProviderConfig
from image_agent.media.service import (
    generate_ui_image,
    images_directory,
    list_generated_images,
    relative_image_path,
)
from tests.fakes import FakeHttpClient, azure_success_response, fixed_clock, fixed_suffix


DESCRIPTION = "A task manager with task cards, due dates and priority badges"


def _provider(tmp_path, client) -> AzureOpenAIProvider:
    return AzureOpenAIProvider(
        AzureProviderConfig(
            endpoint="https://example-resource.openai.azure.com",
            api_key="azure-key",
            deployment="flux-1-1-pro",
            api_version="2025-04-01-preview",
            output_dir=tmp_path / "out",
        ),
        client=client,
        clock=fixed_clock,
        suffix_factory=fixed_suffix,
    )


def test_build_ui_prompt_includes_style_and_type_descriptions() -> None:
    prompt = build_ui_prompt(DESCRIPTION, style="dark", ui_type="dashboard")
    assert prompt.startswith("A high-quality UI design screenshot of a dashboard.")
    assert f"{DESCRIPTION}." in prompt
    assert UI_STYLE_DESCRIPTIONS["dark"] in prompt
    assert UI_TYPE_DESCRIPTIONS["dashboard"] in prompt
    assert prompt.endswith("NO watermarks or labels.")


def test_build_ui_prompt_skips_unknown_style_and_type() -> None:
    prompt = build_ui_prompt(DESCRIPTION, style="brutalist", ui_type="kiosk")
    assert "screenshot of a kiosk." in prompt
    assert "The design features" not in prompt
    assert "This is a" not in prompt


def test_generate_ui_image_requires_twenty_character_description(tmp_path) -> None:
    client = FakeHttpClient(azure_success_response())
    provider = _provider(tmp_path, client)

    with pytest.raises(PromptRequiredError):
        generate_ui_image(provider, "")
    with pytest.raises(PromptTooShortError) as exc_info:
        generate_ui_image(provider, "A todo app, mobile")
    assert "20" in str(exc_info.value)
    assert client.calls == []


def test_generate_ui_image_uses_portrait_standard_png(tmp_path) -> None:
    client = FakeHttpClient(azure_success_response())
    provider = _provider(tmp_path, client)

    result = generate_ui_image(provider, DESCRIPTION, ui_type="mobile app", working_directory=tmp_path / "app")

    payload = client.calls[0]["json"]
    assert payload["size"] == "1024x1440"
    assert payload["quality"] == "standard"
    assert payload["output_format"] == "png"
    assert payload["output_compression"] == 100
    assert "mobile application interface" in payload["prompt"]
    assert result.path.parent == (tmp_path / "app" / "generated-images").resolve()
    assert relative_image_path(result, tmp_path / "app") == "generated-images/azure-flux-2025-06-01-x7k2pq.png"


def test_relative_image_path_defaults_to_current_directory(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    provider = _provider(tmp_path, FakeHttpClient(azure_success_response()))
    result = provider.generate_image("A detailed mountain panorama")
    assert relative_image_path(result) == "out/azure-flux-2025-06-01-x7k2pq.png"


def test_relative_image_path_falls_back_to_absolute_outside_base(tmp_path) -> None:
    provider = _provider(tmp_path, FakeHttpClient(azure_success_response()))
    result = provider.generate_image("A detailed mountain panorama")
    assert relative_image_path(result, tmp_path / "elsewhere") == str(result.path)


def test_list_generated_images_filters_and_orders_newest_first(tmp_path) -> None:
    directory = tmp_path / "generated-images"
    directory.mkdir()
    for index, name in enumerate(["old.png", "middle.JPG", "new.jpeg"]):
        path = directory / name
        path.write_bytes(b"x" * (index + 1))
        os.utime(path, (1_700_000_000 + index * 60, 1_700_000_000 + index * 60))
    (directory / "notes.txt").write_text("ignore me")
    (directory / "nested.png").mkdir()

    images = list_generated_images(directory)

    assert [image.name for image in images] == ["new.jpeg", "middle.JPG", "old.png"]
    assert images[0].size_bytes == 3
    assert images[0].path == (directory / "new.jpeg").resolve()


def test_list_generated_images_creates_missing_directory(tmp_path) -> None:
    directory = tmp_path / "missing"
    assert list_generated_images(directory) == []
    assert directory.is_dir()


def test_images_directory_prefers_working_directory(tmp_path) -> None:
    provider = _provider(tmp_path, FakeHttpClient())
    assert images_directory(provider) == (tmp_path / "out").resolve()
    assert images_directory(provider, tmp_path / "proj") == (tmp_path / "proj" / "generated-images").resolve()
