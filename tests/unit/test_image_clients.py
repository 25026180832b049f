"""Unit tests for the image provider adapters."""

import base64
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from carousel.domain.exceptions import ImageContentError, ProviderError
from carousel.infra.images.content import parse_image_content_type, sniff_image_type
from carousel.infra.images.http_client import HttpImageClient
from carousel.infra.images.openai_client import OpenAIImageClient
from tests._helpers.fakes import PNG_BYTES


class TestHttpImageClient:
    def _client(self, handler, api_key="hf-key") -> HttpImageClient:
        return HttpImageClient(
            endpoint="https://images.example.com/generate",
            api_key=api_key,
            transport=httpx.MockTransport(handler),
        )

    @pytest.mark.asyncio
    async def test_returns_image_bytes_with_mime_type(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("authorization")
            seen["body"] = json.loads(request.content)
            return httpx.Response(
                200, content=PNG_BYTES, headers={"content-type": "image/png"}
            )

        image = await self._client(handler).render("a calm desk")

        assert image.data == PNG_BYTES
        assert image.mime_type == "image/png"
        assert seen == {"auth": "Bearer hf-key", "body": {"inputs": "a calm desk"}}

    @pytest.mark.asyncio
    async def test_no_auth_header_without_key(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("authorization")
            return httpx.Response(200, content=b"\xff\xd8\xff", headers={"content-type": "image/jpeg"})

        await self._client(handler, api_key=None).render("x")

        assert seen["auth"] is None

    @pytest.mark.asyncio
    async def test_non_success_raises_provider_error(self):
        def handler(request):
            return httpx.Response(503, text="model loading")

        with pytest.raises(ProviderError) as excinfo:
            await self._client(handler).render("x")

        assert excinfo.value.status == 503

    @pytest.mark.asyncio
    async def test_non_image_content_rejected(self):
        def handler(request):
            return httpx.Response(200, json={"error": "nope"})

        with pytest.raises(ImageContentError):
            await self._client(handler).render("x")


class TestOpenAIImageClient:
    def _client(self, generate) -> OpenAIImageClient:
        sdk = MagicMock()
        sdk.images.generate = generate
        return OpenAIImageClient(api_key="sk-test", client=sdk)

    @pytest.mark.asyncio
    async def test_decodes_b64_payload(self):
        payload = base64.b64encode(PNG_BYTES).decode()
        generate = AsyncMock(
            return_value=SimpleNamespace(data=[SimpleNamespace(b64_json=payload)])
        )

        image = await self._client(generate).render("a calm desk")

        assert image.data == PNG_BYTES
        assert image.mime_type == "image/png"
        kwargs = generate.call_args.kwargs
        assert kwargs["prompt"] == "a calm desk"
        assert "response_format" not in kwargs

    @pytest.mark.asyncio
    async def test_dall_e_requests_b64_json(self):
        payload = base64.b64encode(PNG_BYTES).decode()
        generate = AsyncMock(
            return_value=SimpleNamespace(data=[SimpleNamespace(b64_json=payload)])
        )
        client = self._client(generate)
        client.model = "dall-e-3"

        await client.render("x")

        assert generate.call_args.kwargs["response_format"] == "b64_json"

    @pytest.mark.parametrize(
        "data",
        [[], [SimpleNamespace(b64_json=None)], [SimpleNamespace(b64_json="!!!")],
         [SimpleNamespace(b64_json=base64.b64encode(b"plain text").decode())]],
    )
    @pytest.mark.asyncio
    async def test_non_image_payload_rejected(self, data):
        generate = AsyncMock(return_value=SimpleNamespace(data=data))

        with pytest.raises(ImageContentError):
            await self._client(generate).render("x")

    @pytest.mark.asyncio
    async def test_status_error_raises_provider_error(self):
        request = httpx.Request("POST", "https://api.openai.com/v1/images/generations")
        response = httpx.Response(400, text="content policy", request=request)
        generate = AsyncMock(
            side_effect=openai.APIStatusError("bad", response=response, body=None)
        )

        with pytest.raises(ProviderError) as excinfo:
            await self._client(generate).render("x")

        assert excinfo.value.status == 400


def test_sniff_image_type():
    assert sniff_image_type(PNG_BYTES) == "image/png"
    assert sniff_image_type(b"\xff\xd8\xff\xe0rest") == "image/jpeg"
    assert sniff_image_type(b"RIFF\x00\x00\x00\x00WEBPVP8 ") == "image/webp"
    assert sniff_image_type(b"<html>") is None


def test_parse_image_content_type():
    assert parse_image_content_type("image/PNG; q=1") == "image/png"
    assert parse_image_content_type("application/json") is None
    assert parse_image_content_type(None) is None
