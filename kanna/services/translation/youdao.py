"""
Youdao Translation Service

Fetches dictionary data for words that are not cached yet. The response body
is returned untouched; interpreting it is left to the formatter.
"""

import logging

import httpx

from kanna.config.constants import (
    HTTP_TIMEOUT_SEC,
    IDLE_CONNECTION_EXPIRY_SEC,
    MAX_IDLE_CONNECTIONS,
    YOUDAO_API_VERSION,
    YOUDAO_DOCTYPE,
    YOUDAO_QUERY_TYPE,
)
from kanna.config.settings import Settings
from kanna.services.exceptions import ProviderError

logger = logging.getLogger(__name__)


def create_http_client() -> httpx.AsyncClient:
    """Create the pooled client shared by provider lookups and audio downloads."""
    return httpx.AsyncClient(
        timeout=HTTP_TIMEOUT_SEC,
        limits=httpx.Limits(
            max_connections=MAX_IDLE_CONNECTIONS,
            max_keepalive_connections=MAX_IDLE_CONNECTIONS,
            keepalive_expiry=IDLE_CONNECTION_EXPIRY_SEC,
        ),
        follow_redirects=True,
        trust_env=True,
    )


class YoudaoClient:
    """Handles lookups against the Youdao open API."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient):
        self.base_url = settings.YOUDAO_BASE_URL
        self.keyfrom = settings.YOUDAO_KEYFROM
        self._key = settings.YOUDAO_KEY
        self._client = client

    def _params(self, word: str) -> dict:
        return {
            "keyfrom": self.keyfrom,
            "key": self._key,
            "type": YOUDAO_QUERY_TYPE,
            "doctype": YOUDAO_DOCTYPE,
            "version": YOUDAO_API_VERSION,
            "q": word,
        }

    async def fetch(self, word: str) -> str:
        """
        Look up one word.

        Args:
            word: Non-empty word to translate

        Returns:
            The raw response body

        Raises:
            ProviderError: on a transport error or any status other than 200
        """
        try:
            response = await self._client.get(self.base_url, params=self._params(word))
        except httpx.HTTPError as e:
            logger.error(f"Youdao request for {word!r} failed: {type(e).__name__}: {e}")
            raise ProviderError(f"Translation request for {word!r} failed: {e}") from e

        if response.status_code != httpx.codes.OK:
            logger.error(f"Youdao returned status {response.status_code} for {word!r}")
            raise ProviderError(
                f"Translation request for {word!r} returned status {response.status_code}"
            )

        logger.debug(f"Youdao lookup for {word!r} returned {len(response.content)} bytes")
        return response.text
