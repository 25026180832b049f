"""Global test configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient

# Providers off by default; tests wire fakes through dependency overrides.
os.environ["ENVIRONMENT"] = "testing"
os.environ["TEXT_PROVIDER"] = "gemini"
os.environ["GEMINI_API_KEY"] = ""
os.environ["GOOGLE_API_KEY"] = ""
os.environ["OPENAI_API_KEY"] = ""
os.environ["IMAGE_PROVIDER"] = ""
os.environ["FALLBACK_ENABLED"] = "true"
os.environ["LOG_FORMAT"] = "console"

from carousel.application.assembler import CarouselService  # noqa: E402
from carousel.infra.config.dependencies import get_carousel_service  # noqa: E402


@pytest.fixture
def topic() -> str:
    return "produtividade"


@pytest.fixture
def app():
    """FastAPI application instance for testing."""
    from carousel.main import app

    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def use_service(app):
    """Install a CarouselService built from the given fakes for the next requests."""

    def _install(**kwargs) -> CarouselService:
        service = CarouselService(**kwargs)
        app.dependency_overrides[get_carousel_service] = lambda: service
        return service

    return _install
