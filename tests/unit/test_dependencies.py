"""Unit tests for settings-driven provider selection."""

import pytest

from carousel.domain.exceptions import ConfigurationError
from carousel.infra.config.dependencies import (
    build_carousel_service,
    build_image_client,
    build_text_client,
)
from carousel.infra.config.settings import Settings, get_settings, reset_settings
from carousel.infra.images.http_client import HttpImageClient
from carousel.infra.images.openai_client import OpenAIImageClient
from carousel.infra.llm.gemini_client import GeminiTextClient
from carousel.infra.llm.langchain_client import LangChainTextClient


def _settings(**overrides) -> Settings:
    base = {
        "text_provider": "gemini",
        "gemini_api_key": None,
        "openai_api_key": None,
        "image_provider": "",
        "image_api_key": None,
        "image_endpoint": None,
    }
    base.update(overrides)
    return Settings(_env_file=None, **base)


def test_gemini_selected_when_key_present():
    client = build_text_client(_settings(gemini_api_key="g-key", text_timeout_seconds=12))

    assert isinstance(client, GeminiTextClient)
    assert client.timeout == 12


def test_openai_selected_by_provider_name():
    client = build_text_client(_settings(text_provider="OpenAI", openai_api_key="sk-test"))

    assert isinstance(client, LangChainTextClient)


@pytest.mark.parametrize("provider", ["gemini", "openai"])
def test_missing_text_key_means_unconfigured(provider):
    assert build_text_client(_settings(text_provider=provider, gemini_api_key="  ")) is None


def test_unknown_text_provider_is_configuration_error():
    with pytest.raises(ConfigurationError):
        build_text_client(_settings(text_provider="llama"))


def test_images_disabled_by_default():
    assert build_image_client(_settings()) is None


def test_http_image_provider():
    client = build_image_client(
        _settings(image_provider="http", image_endpoint="https://img.example.com")
    )

    assert isinstance(client, HttpImageClient)


def test_http_image_provider_requires_endpoint():
    with pytest.raises(ConfigurationError):
        build_image_client(_settings(image_provider="http"))


def test_openai_image_provider_reuses_openai_key():
    client = build_image_client(_settings(image_provider="openai", openai_api_key="sk-test"))

    assert isinstance(client, OpenAIImageClient)


def test_openai_image_provider_requires_key():
    with pytest.raises(ConfigurationError):
        build_image_client(_settings(image_provider="openai"))


def test_unknown_image_provider_is_configuration_error():
    with pytest.raises(ConfigurationError):
        build_image_client(_settings(image_provider="midjourney"))


def test_service_wiring():
    service = build_carousel_service(
        _settings(gemini_api_key="g-key", fallback_enabled=False, image_timeout_seconds=3)
    )

    assert isinstance(service.text_client, GeminiTextClient)
    assert service.image_client is None
    assert service.fanout is None
    assert service.fallback_enabled is False


def test_google_api_key_alias(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "from-google")
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    assert Settings(_env_file=None).gemini_api_key == "from-google"


@pytest.fixture
def fresh_settings(monkeypatch):
    reset_settings()
    yield monkeypatch
    reset_settings()


def test_settings_are_cached_until_reset(fresh_settings):
    fresh_settings.setenv("IMAGE_TIMEOUT_SECONDS", "3")
    first = get_settings()
    fresh_settings.setenv("IMAGE_TIMEOUT_SECONDS", "5")

    assert get_settings() is first
    assert first.image_timeout_seconds == 3

    reset_settings()

    assert get_settings().image_timeout_seconds == 5
