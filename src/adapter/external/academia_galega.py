"""Real Academia Galega dictionary adapter.

Implements DictionaryPort by posting the dictionary portlet's search form
and returning the decoded JSON payload. The payload carries a list of
``items``, each with an ``htmlContent`` fragment and an optional ``title``.

Endpoint: https://academia.gal/dicionario
"""

import logging
import os
from typing import Any

import httpx

from port.dictionary import DictionaryFetchError

logger = logging.getLogger(__name__)

ACADEMIA_GALEGA_URL = os.getenv("GALICIAN_DICTIONARY_URL", "https://academia.gal/dicionario")
API_TIMEOUT_SECONDS = float(os.getenv("DICTIONARY_TIMEOUT_SECONDS", "10"))

_PORTLET_ID = "com_ideit_ragportal_liferay_dictionary_NormalSearchPortlet"
_PORTLET_NS = f"_{_PORTLET_ID}_"

_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:136.0) Gecko/20100101 Firefox/136.0",
    "Accept": "application/json, text/javascript, */*",
    "Accept-Language": "gl-ES,gl;q=0.8,en-US;q=0.5,en;q=0.3",
    "X-Requested-With": "XMLHttpRequest",
    "Content-Type": "application/x-www-form-urlencoded; charset=UTF-8",
    "Origin": "https://academia.gal",
    "Referer": "https://academia.gal/dicionario",
    "Sec-Fetch-Dest": "empty",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Site": "same-origin",
}


def build_query_params(word: str) -> dict[str, str]:
    """Portlet query string for a normal (headword) search."""
    return {
        "p_p_id": _PORTLET_ID,
        "p_p_lifecycle": "2",
        "p_p_state": "normal",
        "p_p_mode": "view",
        "p_p_cacheability": "cacheLevelPage",
        f"{_PORTLET_NS}cmd": "cmdNormalSearch",
        f"{_PORTLET_NS}renderMode": "load",
        f"{_PORTLET_NS}nounTitle": word,
    }


def build_form_data(word: str) -> dict[str, str]:
    return {f"{_PORTLET_NS}fieldSearchNoun": word}


class AcademiaGalegaAdapter:
    """Adapter that fetches entries from the Academia Galega dictionary."""

    def __init__(
        self,
        base_url: str = ACADEMIA_GALEGA_URL,
        timeout: float = API_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    async def fetch(self, word: str) -> Any | None:
        """Fetch the raw search payload for a word.

        Args:
            word: The Galician word to look up.

        Returns:
            Decoded JSON payload, or None when the service answers 404.

        Raises:
            DictionaryFetchError: On HTTP errors, network errors or a body
                that is not JSON.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, headers=_HEADERS, transport=self._transport,
            ) as client:
                response = await client.post(
                    self.base_url,
                    params=build_query_params(word),
                    data=build_form_data(word),
                )

                if response.status_code == 404:
                    logger.debug("Word not found in Academia Galega dictionary", extra={"word": word})
                    return None

                response.raise_for_status()
                payload = response.json()

        except httpx.HTTPStatusError as e:
            logger.warning(
                "Academia Galega HTTP error",
                extra={"word": word, "status_code": e.response.status_code},
            )
            raise DictionaryFetchError(f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.warning(
                "Academia Galega request error",
                extra={"word": word, "error_type": type(e).__name__},
            )
            raise DictionaryFetchError(type(e).__name__) from e
        except ValueError as e:
            logger.warning(
                "Academia Galega returned a non-JSON body",
                extra={"word": word, "error": str(e)},
            )
            raise DictionaryFetchError("Invalid JSON response") from e

        logger.debug(
            "Academia Galega lookup completed",
            extra={"word": word, "payload_type": type(payload).__name__},
        )
        return payload
