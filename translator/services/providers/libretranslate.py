"""LibreTranslate provider (secondary).

POST request with a JSON body. No echo guard: LibreTranslate either
translates or returns an error payload.
"""

import httpx
import structlog

from translator.core.exceptions import ProviderError
from translator.services.providers.base import TranslationProvider

logger = structlog.get_logger(__name__)

_DEFAULT_URL = "https://libretranslate.de/translate"


class LibreTranslateProvider(TranslationProvider):
    """LibreTranslate instance reachable over HTTP."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str = _DEFAULT_URL,
        max_text_length: int = 500,
        api_key: str = "",
    ) -> None:
        self._client = client
        self._url = url
        self._max_text_length = max_text_length
        self._api_key = api_key

    @property
    def name(self) -> str:
        return "libretranslate"

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        body = {
            "q": text[: self._max_text_length],
            "source": source_lang,
            "target": target_lang,
            "format": "text",
        }
        if self._api_key:
            body["api_key"] = self._api_key

        try:
            response = await self._client.post(
                self._url,
                json=body,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
            )
        except httpx.HTTPError as e:
            raise ProviderError(self.name, f"request failed: {e}") from e

        if not response.is_success:
            raise ProviderError(
                self.name,
                f"HTTP {response.status_code} {response.reason_phrase}",
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(self.name, "response is not valid JSON") from e

        translated = data.get("translatedText") if isinstance(data, dict) else None
        if not translated or not isinstance(translated, str):
            raise ProviderError(self.name, "no translation returned")

        logger.debug(
            "libretranslate_translate_ok",
            source=source_lang,
            target=target_lang,
            text_len=len(text),
        )
        return translated
