"""
OpenAI Images API adapter.
"""

import base64
import binascii
from typing import Optional

import openai
from openai import AsyncOpenAI

from carousel.application.ports import ImageGenerationPort
from carousel.domain.exceptions import ImageContentError, ProviderError
from carousel.domain.models import GeneratedImage
from carousel.infra.config.logging_config import get_logger
from carousel.infra.images.content import sniff_image_type


class OpenAIImageClient(ImageGenerationPort):
    """Generates one image per prompt and returns the decoded bytes."""

    name = "openai"

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-image-1",
        size: str = "1024x1024",
        timeout: float = 8.0,
        base_url: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.model = model
        self.size = size
        self.client = client or AsyncOpenAI(
            api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0
        )
        self._log = get_logger("infra.images.openai")

    async def render(self, prompt: str) -> GeneratedImage:
        kwargs = {"model": self.model, "prompt": prompt, "size": self.size, "n": 1}
        # dall-e models return URLs unless asked otherwise; gpt-image-* always returns base64
        if self.model.startswith("dall-e"):
            kwargs["response_format"] = "b64_json"

        try:
            response = await self.client.images.generate(**kwargs)
        except openai.APIStatusError as exc:
            self._log.warning(
                "images.openai.http_error",
                status_code=exc.status_code,
                body=exc.response.text[:500],
            )
            raise ProviderError(
                f"OpenAI Images returned HTTP {exc.status_code}",
                status=exc.status_code,
                body=exc.response.text,
                provider=self.name,
            ) from exc
        except openai.APIError as exc:
            raise ProviderError(
                f"Could not reach OpenAI Images: {exc}", provider=self.name
            ) from exc

        b64_payload = response.data[0].b64_json if response.data else None
        if not b64_payload:
            raise ImageContentError(None, provider=self.name)
        try:
            data = base64.b64decode(b64_payload, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ImageContentError("invalid base64", provider=self.name) from exc

        mime_type = sniff_image_type(data)
        if mime_type is None:
            raise ImageContentError("unrecognized bytes", provider=self.name)
        return GeneratedImage(data=data, mime_type=mime_type)
