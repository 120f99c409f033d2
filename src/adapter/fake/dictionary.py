"""In-memory implementation of DictionaryPort for testing."""

from typing import Any

from port.dictionary import DictionaryFetchError


class FakeDictionaryAdapter:
    """Fake dictionary adapter that returns a preconfigured payload."""

    def __init__(self, payload: Any | None = None, error: DictionaryFetchError | None = None):
        self.payload = payload
        self.error = error
        self.last_word: str | None = None
        self.calls = 0

    async def fetch(self, word: str) -> Any | None:
        self.last_word = word
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payload


def make_payload(html_content: str | None, title: str | None = None) -> dict:
    """Build a single-item payload shaped like the Academia Galega response."""
    item: dict[str, Any] = {}
    if html_content is not None:
        item["htmlContent"] = html_content
    if title is not None:
        item["title"] = title
    return {"items": [item]}
