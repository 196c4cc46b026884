from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from app.deps import get_feed_scanner, get_feed_source
from app.schemas.assess import FeedScanResponse
from core.errors import FeedUnavailableError

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/feed/scan", response_model=FeedScanResponse)
def feed_scan_endpoint() -> FeedScanResponse:
    try:
        payload = get_feed_scanner().scan(get_feed_source())
    except FeedUnavailableError as exc:
        logger.warning("Feed scan failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="FEED_UNAVAILABLE",
        ) from exc
    return FeedScanResponse(**payload)
