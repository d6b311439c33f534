"""Unit tests for DeepLTranslationClient"""

import json

import httpx
import pytest

from domain.exceptions import TranslationUnavailable
from domain.value_objects.language import get_language
from infrastructure.translation.deepl_client import DeepLTranslationClient
from shared.config.settings import DeepLConfig

FRENCH = get_language("fr")
ENGLISH = get_language("en")
SPANISH = get_language("es")


def make_client(handler, **config):
    """DeepL client whose HTTP traffic goes to `handler`."""
    deepl_config = DeepLConfig(api_key="test-key:fx", **config)
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return DeepLTranslationClient(deepl_config, client=http_client)


def ok(*texts):
    return httpx.Response(
        200,
        json={"translations": [{"detected_source_language": "FR", "text": t} for t in texts]},
    )


class TestDeepLTranslationClient:
    """Tests for DeepLTranslationClient"""

    @pytest.mark.asyncio
    async def test_request_shape(self):
        """Texts, languages and auth header are sent as DeepL expects"""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return ok("Noche de incursión", "Traed pociones")

        client = make_client(handler)
        result = await client.translate_batch(["Soirée raid", "Apportez des potions"], SPANISH, FRENCH)

        assert result == ["Noche de incursión", "Traed pociones"]
        assert seen["url"] == "https://api-free.deepl.com/v2/translate"
        assert seen["auth"] == "DeepL-Auth-Key test-key:fx"
        assert seen["body"] == {
            "text": ["Soirée raid", "Apportez des potions"],
            "target_lang": "ES",
            "source_lang": "FR",
        }

    @pytest.mark.asyncio
    async def test_regional_target_code(self):
        """English is requested as a regional variant"""
        seen = {}

        def handler(request):
            seen["body"] = json.loads(request.content)
            return ok("Raid night")

        client = make_client(handler)
        await client.translate("Soirée raid", ENGLISH, FRENCH)

        assert seen["body"]["target_lang"] == "EN-GB"

    @pytest.mark.asyncio
    async def test_translate_single_text(self):
        client = make_client(lambda request: ok("Hola"))

        assert await client.translate("Salut", SPANISH, FRENCH) == "Hola"

    @pytest.mark.asyncio
    async def test_custom_api_url(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            return ok("Hola")

        client = make_client(handler, api_url="https://api.deepl.com/v2/translate")
        await client.translate("Salut", SPANISH, FRENCH)

        assert seen["url"] == "https://api.deepl.com/v2/translate"

    @pytest.mark.asyncio
    async def test_empty_batch_makes_no_request(self):
        def handler(request):
            raise AssertionError("no request expected")

        client = make_client(handler)

        assert await client.translate_batch([], SPANISH, FRENCH) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status,reason", [
        (403, "authorization failed"),
        (456, "quota exceeded"),
        (429, "too many requests"),
        (500, "HTTP 500"),
    ])
    async def test_http_errors(self, status, reason):
        """HTTP errors become TranslationUnavailable with a reason"""
        client = make_client(lambda request: httpx.Response(status, json={"message": "nope"}))

        with pytest.raises(TranslationUnavailable, match=reason) as exc_info:
            await client.translate("Salut", SPANISH, FRENCH)

        assert exc_info.value.target_language == "es"

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = make_client(handler)

        with pytest.raises(TranslationUnavailable, match="timeout"):
            await client.translate("Salut", SPANISH, FRENCH)

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        client = make_client(handler)

        with pytest.raises(TranslationUnavailable, match="connection error"):
            await client.translate("Salut", SPANISH, FRENCH)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("response", [
        httpx.Response(200, text="<html>oops</html>"),
        httpx.Response(200, json={}),
        httpx.Response(200, json={"translations": []}),
        httpx.Response(200, json=[{"text": "Hola"}]),
    ])
    async def test_invalid_response(self, response):
        client = make_client(lambda request: response)

        with pytest.raises(TranslationUnavailable, match="invalid response"):
            await client.translate("Salut", SPANISH, FRENCH)

    @pytest.mark.asyncio
    async def test_short_response_for_batch(self):
        """Fewer translations than texts is an invalid response"""
        client = make_client(lambda request: ok("Hola"))

        with pytest.raises(TranslationUnavailable, match="invalid response"):
            await client.translate_batch(["Salut", "Potions"], SPANISH, FRENCH)

    @pytest.mark.asyncio
    async def test_empty_translation(self):
        client = make_client(lambda request: ok(""))

        with pytest.raises(TranslationUnavailable, match="empty translation"):
            await client.translate("Salut", SPANISH, FRENCH)

    @pytest.mark.asyncio
    async def test_close_owned_client(self):
        """A client created by the service is closed by it"""
        client = DeepLTranslationClient(DeepLConfig(api_key="test-key:fx"))

        await client.close()

        assert client._client.is_closed

    @pytest.mark.asyncio
    async def test_close_leaves_injected_client_open(self):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: ok("x")))
        client = DeepLTranslationClient(DeepLConfig(api_key="test-key:fx"), client=http_client)

        await client.close()

        assert not http_client.is_closed
        await http_client.aclose()
