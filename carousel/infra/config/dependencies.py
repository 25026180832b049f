"""
Provider selection and FastAPI dependency wiring.

Which text and image adapters exist is decided here from settings; the
pipeline only ever sees the port interfaces.
"""

from typing import Optional

from fastapi import Depends

from carousel.application.assembler import CarouselService
from carousel.application.ports import ImageGenerationPort, TextGenerationPort
from carousel.domain.exceptions import ConfigurationError
from carousel.infra.config.logging_config import get_logger
from carousel.infra.config.settings import Settings, get_settings
from carousel.infra.images.http_client import HttpImageClient
from carousel.infra.images.openai_client import OpenAIImageClient
from carousel.infra.llm.gemini_client import GeminiTextClient
from carousel.infra.llm.langchain_client import LangChainTextClient

TEXT_PROVIDERS = ("gemini", "openai")
IMAGE_PROVIDERS = ("openai", "http")

logger = get_logger("providers")


def _present(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def build_text_client(settings: Settings) -> Optional[TextGenerationPort]:
    """Text adapter for ``settings.text_provider``; ``None`` when its key is absent."""
    provider = settings.text_provider.strip().lower()
    if provider not in TEXT_PROVIDERS:
        raise ConfigurationError(
            f"Unknown TEXT_PROVIDER '{settings.text_provider}'. "
            f"Expected one of: {', '.join(TEXT_PROVIDERS)}."
        )

    if provider == "gemini":
        if not _present(settings.gemini_api_key):
            logger.info("providers.text.unconfigured", provider=provider)
            return None
        return GeminiTextClient(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            top_k=settings.llm_top_k,
            top_p=settings.llm_top_p,
            timeout=settings.text_timeout_seconds,
        )

    if not _present(settings.openai_api_key):
        logger.info("providers.text.unconfigured", provider=provider)
        return None
    return LangChainTextClient(
        api_key=settings.openai_api_key,
        model_name=settings.openai_model,
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
        timeout=settings.text_timeout_seconds,
        base_url=settings.openai_base_url,
    )


def build_image_client(settings: Settings) -> Optional[ImageGenerationPort]:
    """Image adapter for ``settings.image_provider``; ``None`` when images are disabled."""
    if not settings.images_enabled():
        return None

    provider = settings.image_provider.strip().lower()
    if provider == "openai":
        api_key = settings.image_api_key or settings.openai_api_key
        if not _present(api_key):
            raise ConfigurationError(
                "IMAGE_PROVIDER=openai requires IMAGE_API_KEY (or OPENAI_API_KEY)."
            )
        return OpenAIImageClient(
            api_key=api_key,
            model=settings.image_model,
            size=settings.image_size,
            timeout=settings.image_timeout_seconds,
            base_url=settings.openai_base_url,
        )

    if provider == "http":
        if not _present(settings.image_endpoint):
            raise ConfigurationError("IMAGE_PROVIDER=http requires IMAGE_ENDPOINT.")
        return HttpImageClient(
            endpoint=settings.image_endpoint,
            api_key=settings.image_api_key,
            timeout=settings.image_timeout_seconds,
        )

    raise ConfigurationError(
        f"Unknown IMAGE_PROVIDER '{settings.image_provider}'. "
        f"Expected one of: {', '.join(IMAGE_PROVIDERS)}."
    )


def build_carousel_service(settings: Settings) -> CarouselService:
    return CarouselService(
        text_client=build_text_client(settings),
        image_client=build_image_client(settings),
        fallback_enabled=settings.fallback_enabled,
        image_timeout=settings.image_timeout_seconds,
    )


def get_carousel_service(
    settings: Settings = Depends(get_settings),
) -> CarouselService:
    """FastAPI dependency: a fresh pipeline per request, nothing shared across requests."""
    return build_carousel_service(settings)
