"""Gemini-backed machine translation (implements ITranslationService).

Calls the Generative Language REST API directly with httpx. The model is
asked to return only the translated text; surrounding quotes it sometimes
adds are stripped.
"""

from __future__ import annotations

from typing import Any

import httpx

from cms.core.config import Settings, get_settings
from cms.domain.exceptions import TranslationException
from cms.shared.telemetry.logging import get_logger
from cms.shared.telemetry.tracing import traced

logger = get_logger(__name__)

_LANGUAGE_NAMES = {"es": "Spanish", "en": "English"}

_PROMPT = (
    "Translate the following text from {source} to {target}. "
    "Only return the translated text.\n\n"
    'Text to translate:\n"{text}"'
)


def build_prompt(text: str, source_lang: str, target_lang: str) -> str:
    """Return the translation prompt for one text."""
    return _PROMPT.format(
        source=_LANGUAGE_NAMES.get(source_lang, source_lang),
        target=_LANGUAGE_NAMES.get(target_lang, target_lang),
        text=text,
    )


def _strip_quotes(text: str) -> str:
    text = text.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'":
        text = text[1:-1].strip()
    return text


def extract_text(payload: dict[str, Any]) -> str | None:
    """Return the first candidate's text from a generateContent response."""
    try:
        parts = payload["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        return None
    text = "".join(p.get("text", "") for p in parts if isinstance(p, dict))
    return _strip_quotes(text) or None


class GeminiTranslationService:
    """Translate short site strings between es and en."""

    def __init__(
        self,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._http = http_client

    @property
    def enabled(self) -> bool:
        return self._settings.translation_enabled and self._settings.google_api_key is not None

    def _endpoint(self) -> str:
        base = self._settings.translation_base_url.rstrip("/")
        return f"{base}/models/{self._settings.translation_model}:generateContent"

    async def _post(self, body: dict[str, Any], api_key: str) -> httpx.Response:
        if self._http is not None:
            return await self._http.post(self._endpoint(), params={"key": api_key}, json=body)
        async with httpx.AsyncClient(timeout=self._settings.translation_timeout_seconds) as client:
            return await client.post(self._endpoint(), params={"key": api_key}, json=body)

    @traced("translation.translate")
    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """Return text translated from source_lang to target_lang.

        Raises:
            TranslationException: If translation is disabled, the request
                fails, or the response carries no text.
        """
        if source_lang == target_lang:
            return text
        if not self.enabled:
            raise TranslationException(source_lang, target_lang, "translation not configured")

        api_key = self._settings.google_api_key.get_secret_value()
        body = {"contents": [{"parts": [{"text": build_prompt(text, source_lang, target_lang)}]}]}
        try:
            response = await self._post(body, api_key)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Translation request rejected: %s (%s->%s)",
                e.response.status_code,
                source_lang,
                target_lang,
            )
            raise TranslationException(
                source_lang, target_lang, f"HTTP {e.response.status_code}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise TranslationException(source_lang, target_lang, str(e) or type(e).__name__) from e

        translated = extract_text(payload)
        if translated is None:
            raise TranslationException(source_lang, target_lang, "empty response")
        logger.debug("Translated %d chars %s->%s", len(text), source_lang, target_lang)
        return translated
