import pytest

from image_agent.core.config import Settings
from image_agent.media.errors import ConfigurationIncompleteError, UnknownProviderError
from image_agent.media.providers.azure_provider import AzureOpenAIProvider
from image_agent.media.providers.factory import create_image_provider
from image_agent.media.providers.google_provider import GoogleNanoBananaProvider


def _settings(tmp_path, **overrides) -> Settings:
    values = {
        "output_dir": str(tmp_path / "images"),
        "gemini_api_key": "gemini-key",
        "azure_openai_endpoint": "https://example-resource.openai.azure.com",
        "azure_openai_api_key": "azure-key",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_google_is_the_default_provider(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("IMAGE_PROVIDER", raising=False)
    provider = create_image_provider(_settings(tmp_path))
    assert isinstance(provider, GoogleNanoBananaProvider)
    assert provider.get_name() == "google-nano-banana"
    assert provider.output_dir == (tmp_path / "images").resolve()


def test_azure_discriminator(tmp_path) -> None:
    provider = create_image_provider(_settings(tmp_path, image_provider=" Azure "))
    assert isinstance(provider, AzureOpenAIProvider)
    assert provider.get_name() == "azure-openai"
    assert provider.config.deployment == "flux-1-1-pro"
    assert provider.config.api_version == "2025-04-01-preview"


def test_unknown_discriminator_names_value_and_supported_set(tmp_path) -> None:
    with pytest.raises(UnknownProviderError) as exc_info:
        create_image_provider(_settings(tmp_path, image_provider="stability"))
    message = str(exc_info.value)
    assert "stability" in message
    assert "azure" in message
    assert "google" in message


def test_incomplete_azure_settings_fail_fast(tmp_path) -> None:
    with pytest.raises(ConfigurationIncompleteError):
        create_image_provider(
            _settings(tmp_path, image_provider="azure", azure_openai_endpoint="", azure_openai_api_key="")
        )


def test_relative_output_dir_resolves_against_cwd(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    provider = create_image_provider(_settings(tmp_path, output_dir="renders"))
    assert provider.output_dir == (tmp_path / "renders").resolve()


def test_each_call_builds_a_new_provider(tmp_path) -> None:
    settings = _settings(tmp_path)
    assert create_image_provider(settings) is not create_image_provider(settings)
