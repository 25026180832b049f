"""
Gemini text generation over the public REST API.
"""

import asyncio
from typing import Any, Dict, Optional

import httpx

from carousel.application.ports import TextGenerationPort
from carousel.domain.exceptions import ProviderError, ProviderTimeoutError
from carousel.infra.config.logging_config import get_logger

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


def extract_candidate_text(payload: Any) -> Optional[str]:
    """Return ``candidates[0].content.parts[0].text`` or ``None``."""
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) and text.strip() else None


class GeminiTextClient(TextGenerationPort):
    """Calls ``models/{model}:generateContent`` once per prompt."""

    name = "gemini"

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-flash",
        base_url: str = DEFAULT_BASE_URL,
        temperature: float = 0.8,
        max_tokens: int = 2048,
        top_k: int = 40,
        top_p: float = 0.95,
        timeout: float = 25.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.generation_config = {
            "temperature": temperature,
            "topK": top_k,
            "topP": top_p,
            "maxOutputTokens": max_tokens,
        }
        self._transport = transport
        self._log = get_logger("infra.llm.gemini")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def _build_body(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": self.generation_config,
        }

    async def _post(self, prompt: str) -> httpx.Response:
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            return await client.post(
                self.endpoint,
                headers={"x-goog-api-key": self.api_key},
                json=self._build_body(prompt),
            )

    async def generate(self, prompt: str) -> str:
        try:
            response = await asyncio.wait_for(self._post(prompt), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            raise ProviderTimeoutError(self.name, self.timeout) from exc
        except httpx.HTTPError as exc:
            raise ProviderError(
                f"Could not reach Gemini: {exc}", provider=self.name
            ) from exc

        if not response.is_success:
            self._log.error(
                "llm.gemini.http_error",
                status_code=response.status_code,
                body=response.text[:2000],
            )
            raise ProviderError(
                f"Gemini returned HTTP {response.status_code}",
                status=response.status_code,
                body=response.text,
                provider=self.name,
            )

        try:
            payload = response.json()
        except ValueError:
            payload = None
        text = extract_candidate_text(payload)
        if text is None:
            self._log.error("llm.gemini.unexpected_shape", body=response.text[:2000])
            raise ProviderError(
                "Unexpected Gemini response: no generated content",
                status=response.status_code,
                body=response.text,
                provider=self.name,
            )

        self._log.info("llm.invoke.text", provider=self.name, model=self.model)
        return text
