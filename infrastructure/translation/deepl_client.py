"""
DeepL translation client.

One POST /v2/translate per call; several texts travel in one request.
The httpx client is created once and closed on shutdown.
"""

import logging
from typing import List, Optional

import httpx

from domain.exceptions import TranslationUnavailable
from domain.services.translation_service import ITranslationService
from domain.value_objects.language import LanguageEntry
from shared.config.settings import DeepLConfig
from shared.constants import DEEPL_MAX_ERROR_BODY

logger = logging.getLogger(__name__)

# DeepL-specific status codes worth naming in logs
_STATUS_REASONS = {
    403: "authorization failed",
    413: "request too large",
    429: "too many requests",
    456: "quota exceeded",
}


class DeepLTranslationClient(ITranslationService):
    """Translation service backed by the DeepL REST API"""

    def __init__(self, config: DeepLConfig, client: Optional[httpx.AsyncClient] = None):
        self._config = config
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=config.timeout_seconds)

    def _headers(self) -> dict:
        return {
            "Authorization": f"DeepL-Auth-Key {self._config.api_key}",
            "Content-Type": "application/json",
        }

    async def translate_batch(
        self,
        texts: List[str],
        target_language: LanguageEntry,
        source_language: LanguageEntry,
    ) -> List[str]:
        """
        Translate texts from source_language to target_language.

        Raises:
            TranslationUnavailable: On HTTP, transport or response-shape errors
        """
        target = target_language.code
        if not texts:
            return []

        payload = {
            "text": list(texts),
            "target_lang": target_language.provider_target_code,
            "source_lang": source_language.source_code,
        }

        try:
            resp = await self._client.post(
                self._config.api_url,
                headers=self._headers(),
                json=payload,
                timeout=self._config.timeout_seconds,
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            reason = _STATUS_REASONS.get(status, f"HTTP {status}")
            logger.error(
                "DeepL API error for %s: %s %s",
                target, status, exc.response.text[:DEEPL_MAX_ERROR_BODY],
            )
            raise TranslationUnavailable(target, reason) from exc
        except httpx.TimeoutException as exc:
            logger.error("DeepL request timed out for %s after %ss", target, self._config.timeout_seconds)
            raise TranslationUnavailable(target, "timeout") from exc
        except httpx.RequestError as exc:
            logger.error("DeepL connection error for %s: %s", target, exc)
            raise TranslationUnavailable(target, "connection error") from exc

        return self._parse_translations(resp, target, expected=len(texts))

    @staticmethod
    def _parse_translations(resp: httpx.Response, target: str, expected: int) -> List[str]:
        try:
            data = resp.json()
        except ValueError as exc:
            logger.error("DeepL returned non-JSON body for %s", target)
            raise TranslationUnavailable(target, "invalid response") from exc

        translations = data.get("translations") if isinstance(data, dict) else None
        if not isinstance(translations, list) or len(translations) < expected:
            logger.error("DeepL response for %s has no usable translations: %r", target, data)
            raise TranslationUnavailable(target, "invalid response")

        results = []
        for item in translations[:expected]:
            text = item.get("text") if isinstance(item, dict) else None
            if not isinstance(text, str) or not text:
                logger.error("DeepL returned an empty translation for %s", target)
                raise TranslationUnavailable(target, "empty translation")
            results.append(text)
        return results

    async def close(self) -> None:
        """Close the HTTP client if this instance created it"""
        if self._owns_client:
            await self._client.aclose()
