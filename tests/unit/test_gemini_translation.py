"""Tests for the Gemini translation client (HTTP mocked with httpx.MockTransport)."""

import json

import httpx
import pytest

from cms.core.config import Settings
from cms.domain.exceptions import TranslationException
from cms.infrastructure.external.translation import GeminiTranslationService
from cms.infrastructure.external.translation.gemini_client import build_prompt, extract_text


def _reply(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def _service(handler, **overrides) -> GeminiTranslationService:
    settings = Settings(google_api_key="g-key", **overrides)
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GeminiTranslationService(settings, http_client=client)


def test_prompt_names_both_languages() -> None:
    prompt = build_prompt("Inicio", "es", "en")
    assert "from Spanish to English" in prompt
    assert prompt.endswith('"Inicio"')


@pytest.mark.parametrize(
    "payload, expected",
    [
        (_reply("Home"), "Home"),
        (_reply('"Home"\n'), "Home"),
        (_reply("  'Start'  "), "Start"),
        ({"candidates": []}, None),
        ({}, None),
        (_reply(""), None),
    ],
)
def test_extract_text(payload, expected) -> None:
    assert extract_text(payload) == expected


async def test_translate_posts_prompt_with_key() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_reply("Welcome"))

    assert await _service(handler).translate("Bienvenida", "es", "en") == "Welcome"
    request = seen[0]
    assert request.url.params["key"] == "g-key"
    assert request.url.path.endswith(":generateContent")
    body = json.loads(request.content)
    assert "Bienvenida" in body["contents"][0]["parts"][0]["text"]


async def test_same_language_is_returned_unchanged() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    assert await _service(handler).translate("Hola", "es", "es") == "Hola"


async def test_http_error_raises_translation_exception() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": "unavailable"})

    with pytest.raises(TranslationException) as exc_info:
        await _service(handler).translate("Hola", "es", "en")
    assert exc_info.value.details["reason"] == "HTTP 503"


async def test_transport_error_raises_translation_exception() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("down", request=request)

    with pytest.raises(TranslationException):
        await _service(handler).translate("Hola", "es", "en")


async def test_empty_reply_raises_translation_exception() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"candidates": []})

    with pytest.raises(TranslationException):
        await _service(handler).translate("Hola", "es", "en")


async def test_disabled_service_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    service = _service(handler, translation_enabled=False)
    assert not service.enabled
    with pytest.raises(TranslationException):
        await service.translate("Hola", "es", "en")
