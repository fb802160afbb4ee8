"""MyMemory translation provider (primary).

GET request with the language pair packed into a single ``langpair``
parameter. MyMemory is known to echo the input back when it has no
translation, so an unchanged result is rejected as a failure.
"""

import httpx
import structlog

from translator.core.exceptions import NoOpResultError, ProviderError
from translator.services.providers.base import TranslationProvider

logger = structlog.get_logger(__name__)

_DEFAULT_URL = "https://api.mymemory.translated.net/get"
_USER_AGENT = "Mozilla/5.0 (compatible; TranslatorApp/1.0)"


class MyMemoryProvider(TranslationProvider):
    """MyMemory public API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str = _DEFAULT_URL,
        max_text_length: int = 500,
        email: str = "",
    ) -> None:
        self._client = client
        self._url = url
        self._max_text_length = max_text_length
        self._email = email

    @property
    def name(self) -> str:
        return "mymemory"

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        params = {
            "q": text[: self._max_text_length],
            "langpair": f"{source_lang}|{target_lang}",
        }
        if self._email:
            # Registered e-mail raises MyMemory's daily quota
            params["de"] = self._email

        try:
            response = await self._client.get(
                self._url,
                params=params,
                headers={"Accept": "application/json", "User-Agent": _USER_AGENT},
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

        response_data = data.get("responseData") if isinstance(data, dict) else None
        translated = (
            response_data.get("translatedText")
            if isinstance(response_data, dict)
            else None
        )
        if not translated or not isinstance(translated, str):
            raise ProviderError(self.name, "response is missing responseData.translatedText")

        status = data.get("responseStatus")
        if status and str(status) != "200":
            raise ProviderError(
                self.name,
                data.get("responseDetails") or f"responseStatus {status}",
            )

        if translated == text and source_lang != target_lang:
            raise NoOpResultError(self.name)

        logger.debug(
            "mymemory_translate_ok",
            langpair=params["langpair"],
            text_len=len(text),
        )
        return translated
