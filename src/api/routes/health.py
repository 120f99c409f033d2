"""Health check endpoint."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter

from adapter.external.academia_galega import ACADEMIA_GALEGA_URL

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health():
    """Liveness check.

    The dictionary source is not probed: lookups are single-shot and a
    failed fetch is reported per call.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "dictionary_url": ACADEMIA_GALEGA_URL,
    }
