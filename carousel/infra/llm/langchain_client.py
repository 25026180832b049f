"""
OpenAI text generation through LangChain.

Retries are disabled on the underlying client: one attempt per request,
the pipeline decides what happens on failure.
"""

import asyncio
from typing import Optional

import openai
from langchain_core.messages import HumanMessage
from langchain_openai import ChatOpenAI

from carousel.application.ports import TextGenerationPort
from carousel.domain.exceptions import ProviderError, ProviderTimeoutError
from carousel.infra.config.logging_config import get_logger


class LangChainTextClient(TextGenerationPort):
    """Chat-completion adapter for OpenAI and OpenAI-compatible servers."""

    name = "openai"

    def __init__(
        self,
        api_key: str,
        model_name: str = "gpt-4o-mini",
        temperature: float = 0.8,
        max_tokens: int = 2048,
        timeout: float = 25.0,
        base_url: Optional[str] = None,
        llm: Optional[ChatOpenAI] = None,
    ):
        llm_kwargs = {
            "model": model_name,
            "api_key": api_key,
            "temperature": temperature,
            "max_tokens": max_tokens,
            "timeout": timeout,
            "max_retries": 0,
        }
        # OpenAI-compatible servers
        if base_url:
            llm_kwargs["base_url"] = base_url

        self.llm = llm or ChatOpenAI(**llm_kwargs)
        self.model_name = model_name
        self.timeout = timeout
        self._log = get_logger("infra.llm.openai")

    async def generate(self, prompt: str) -> str:
        try:
            response = await asyncio.wait_for(
                self.llm.ainvoke([HumanMessage(content=prompt)]), timeout=self.timeout
            )
        except (asyncio.TimeoutError, openai.APITimeoutError) as exc:
            raise ProviderTimeoutError(self.name, self.timeout) from exc
        except openai.APIStatusError as exc:
            self._log.error(
                "llm.openai.http_error",
                status_code=exc.status_code,
                body=exc.response.text[:2000],
            )
            raise ProviderError(
                f"OpenAI returned HTTP {exc.status_code}",
                status=exc.status_code,
                body=exc.response.text,
                provider=self.name,
            ) from exc
        except openai.APIError as exc:
            raise ProviderError(
                f"Could not reach OpenAI: {exc}", provider=self.name
            ) from exc

        content = response.content
        if not isinstance(content, str) or not content.strip():
            raise ProviderError(
                "Unexpected OpenAI response: no generated content", provider=self.name
            )

        self._log.info("llm.invoke.text", provider=self.name, model=self.model_name)
        return content
