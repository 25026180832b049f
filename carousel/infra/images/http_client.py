"""
Generic HTTP image provider.

POSTs ``{"inputs": prompt}`` to a configured endpoint that answers with raw
image bytes (Hugging Face style inference endpoints and compatible servers).
"""

from typing import Optional

import httpx

from carousel.application.ports import ImageGenerationPort
from carousel.domain.exceptions import ImageContentError, ProviderError
from carousel.domain.models import GeneratedImage
from carousel.infra.config.logging_config import get_logger
from carousel.infra.images.content import parse_image_content_type


class HttpImageClient(ImageGenerationPort):
    name = "http"

    def __init__(
        self,
        endpoint: str,
        api_key: Optional[str] = None,
        timeout: float = 8.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint = endpoint
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport
        self._log = get_logger("infra.images.http")

    def _headers(self) -> dict:
        headers = {"Accept": "image/*"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def render(self, prompt: str) -> GeneratedImage:
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                response = await client.post(
                    self.endpoint, headers=self._headers(), json={"inputs": prompt}
                )
            except httpx.HTTPError as exc:
                raise ProviderError(
                    f"Could not reach image endpoint: {exc}", provider=self.name
                ) from exc

        if not response.is_success:
            self._log.warning(
                "images.http.http_error",
                status_code=response.status_code,
                body=response.text[:500],
            )
            raise ProviderError(
                f"Image endpoint returned HTTP {response.status_code}",
                status=response.status_code,
                body=response.text,
                provider=self.name,
            )

        content_type = response.headers.get("content-type")
        mime_type = parse_image_content_type(content_type)
        if mime_type is None or not response.content:
            raise ImageContentError(content_type, provider=self.name)

        return GeneratedImage(data=response.content, mime_type=mime_type)
