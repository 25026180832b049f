"""Unit tests for the Gemini REST adapter."""

import asyncio
import json

import httpx
import pytest

from carousel.domain.exceptions import ProviderError, ProviderTimeoutError
from carousel.infra.llm.gemini_client import GeminiTextClient, extract_candidate_text


def _client(handler, timeout: float = 5.0) -> GeminiTextClient:
    return GeminiTextClient(
        api_key="test-key", timeout=timeout, transport=httpx.MockTransport(handler)
    )


def _candidate(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


@pytest.mark.asyncio
async def test_returns_candidate_text_and_sends_expected_request():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["key"] = request.headers.get("x-goog-api-key")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_candidate('{"slides": []}'))

    text = await _client(handler).generate("hello")

    assert text == '{"slides": []}'
    assert seen["url"].endswith("/models/gemini-1.5-flash:generateContent")
    assert seen["key"] == "test-key"
    assert seen["body"]["contents"][0]["parts"][0]["text"] == "hello"
    assert seen["body"]["generationConfig"] == {
        "temperature": 0.8,
        "topK": 40,
        "topP": 0.95,
        "maxOutputTokens": 2048,
    }


@pytest.mark.asyncio
async def test_non_success_status_raises_provider_error():
    def handler(request):
        return httpx.Response(429, text="quota exceeded")

    with pytest.raises(ProviderError) as excinfo:
        await _client(handler).generate("hello")

    assert excinfo.value.status == 429
    assert excinfo.value.body == "quota exceeded"


@pytest.mark.parametrize(
    "payload", [{}, {"candidates": []}, _candidate(""), {"candidates": [{"content": {}}]}]
)
@pytest.mark.asyncio
async def test_unexpected_shape_raises_provider_error(payload):
    def handler(request):
        return httpx.Response(200, json=payload)

    with pytest.raises(ProviderError, match="Unexpected Gemini response"):
        await _client(handler).generate("hello")


@pytest.mark.asyncio
async def test_transport_timeout_raises_provider_timeout():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(ProviderTimeoutError):
        await _client(handler).generate("hello")


@pytest.mark.asyncio
async def test_bounded_wait_raises_provider_timeout():
    async def handler(request):
        await asyncio.sleep(5)
        return httpx.Response(200, json=_candidate("late"))

    with pytest.raises(ProviderTimeoutError):
        await _client(handler, timeout=0.1).generate("hello")


@pytest.mark.asyncio
async def test_connection_error_raises_provider_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(ProviderError, match="Could not reach Gemini"):
        await _client(handler).generate("hello")


def test_extract_candidate_text_tolerates_garbage():
    assert extract_candidate_text(None) is None
    assert extract_candidate_text({"candidates": "x"}) is None
    assert extract_candidate_text(_candidate("ok")) == "ok"
