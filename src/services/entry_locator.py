"""Entry locator — picks the result item to extract from a raw payload."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from domain.model.entry import LocatedFragment

logger = logging.getLogger(__name__)

ITEMS_FIELD = "items"
FRAGMENT_FIELD = "htmlContent"
TITLE_FIELD = "title"


def locate(payload: Any) -> LocatedFragment | None:
    """Select the markup fragment and title of the best-matching item.

    The upstream service ranks the best match first, so the first item is
    always taken. Never raises: any unusable payload shape is treated as
    "not found".

    Returns:
        LocatedFragment, or None when there is nothing to extract.
    """
    if not isinstance(payload, Mapping):
        if payload is not None:
            logger.warning(
                "Unexpected payload type from dictionary",
                extra={"type": type(payload).__name__},
            )
        return None

    items = payload.get(ITEMS_FIELD)
    if not isinstance(items, Sequence) or isinstance(items, (str, bytes)) or not items:
        return None

    item = items[0]
    if not isinstance(item, Mapping):
        logger.warning(
            "Unexpected result item type from dictionary",
            extra={"type": type(item).__name__},
        )
        return None

    fragment = item.get(FRAGMENT_FIELD)
    if not isinstance(fragment, str) or not fragment:
        logger.warning("No HTML content found in result item", extra={"item_keys": [str(key) for key in item]})
        return None

    title = item.get(TITLE_FIELD)
    if not isinstance(title, str) or not title.strip():
        title = None

    return LocatedFragment(fragment=fragment, title=title)
