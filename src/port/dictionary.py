"""Dictionary port — outbound interface for dictionary data sources."""

from typing import Any, Protocol


class DictionaryFetchError(Exception):
    """Dictionary source could not be reached or returned an unusable response."""


class DictionaryPort(Protocol):
    """Port for fetching raw dictionary payloads.

    fetch() returns the decoded response payload (normally a mapping with an
    ``items`` list) or None when the source reports the word as not found.
    Transport failures raise DictionaryFetchError.
    """

    async def fetch(self, word: str) -> Any | None: ...
