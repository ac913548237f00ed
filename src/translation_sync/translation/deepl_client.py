"""
DeepL API client.

Translates one text fragment per request. There is no retry: any transport
failure, error status or unexpected payload is raised to the caller, which
aborts the run.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, TypedDict

import httpx

from ..utils.core.exceptions import RequestError, ResponseShapeError

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

DEFAULT_API_ENDPOINT = "https://api-free.deepl.com/v2/translate"
DEFAULT_TIMEOUT = 10.0


class Translator(Protocol):
    """Anything that can translate a single text fragment."""

    def translate(self, source_lang: str, dest_lang: str, text: str) -> str:
        """Translate text from source_lang to dest_lang."""
        ...


class DeepLTranslation(TypedDict, total=False):
    """One item of the DeepL ``translations`` list."""

    detected_source_language: str
    text: str


class DeepLClient:
    """DeepL translate endpoint client backed by httpx."""

    api_url: str
    timeout: float
    request_count: int

    def __init__(
        self,
        api_url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_url: Full URL of the DeepL ``/v2/translate`` endpoint
            api_key: DeepL authentication key
            timeout: Per-request timeout in seconds
            client: Optional preconfigured httpx client; when given, the caller
                keeps ownership and it is not closed by this object
        """
        self.api_url = api_url
        self.timeout = timeout
        self.request_count = 0
        self._headers: dict[str, str] = {"Authorization": f"DeepL-Auth-Key {api_key}"}
        self._owns_client: bool = client is None
        self._client: httpx.Client = client or httpx.Client(timeout=timeout)

    def __enter__(self) -> DeepLClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this object created it."""
        if self._owns_client:
            self._client.close()

    def translate(self, source_lang: str, dest_lang: str, text: str) -> str:
        """
        Translate a single text fragment.

        Args:
            source_lang: DeepL source language code; empty lets DeepL detect it
            dest_lang: DeepL target language code
            text: Text to translate, may contain HTML markup

        Returns:
            The translated text

        Raises:
            RequestError: On transport failure, timeout or non-2xx status
            ResponseShapeError: If the body does not hold exactly one translation
        """
        data = {
            "text": text,
            "target_lang": dest_lang.upper(),
            "tag_handling": "html",
        }
        if source_lang:
            data["source_lang"] = source_lang.upper()

        self.request_count += 1
        try:
            response = self._client.post(
                self.api_url,
                data=data,
                headers=self._headers,
                timeout=self.timeout,
            )
            _ = response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise RequestError(
                f"DeepL returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
                context=e.response.text,
            ) from e
        except httpx.HTTPError as e:
            raise RequestError(f"Executing DeepL request failed: {e}") from e

        return self._parse_response(response)

    @staticmethod
    def _parse_response(response: httpx.Response) -> str:
        """Extract the single translated text from a DeepL response."""
        try:
            payload: object = response.json()  # pyright: ignore[reportAny]
        except ValueError as e:
            raise ResponseShapeError(f"Decoding DeepL response failed: {e}") from e

        if not isinstance(payload, dict):
            raise ResponseShapeError(
                f"Unexpected DeepL response type: {type(payload).__name__}"
            )

        translations: object = payload.get("translations")  # pyright: ignore[reportUnknownMemberType]
        if not isinstance(translations, list):
            raise ResponseShapeError("DeepL response has no translations list")

        if len(translations) != 1:  # pyright: ignore[reportUnknownArgumentType]
            raise ResponseShapeError(
                f"Unexpected number of translations: {len(translations)}"  # pyright: ignore[reportUnknownArgumentType]
            )

        item: object = translations[0]
        if not isinstance(item, dict) or not isinstance(item.get("text"), str):  # pyright: ignore[reportUnknownMemberType]
            raise ResponseShapeError("DeepL translation item has no text")

        translation: DeepLTranslation = item  # pyright: ignore[reportAssignmentType]
        return translation["text"]
