"""Health routes - Liveness and configuration checks."""

from fastapi import APIRouter

from parking_feed.core.config import settings
from parking_feed.schemas.api import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
def health():
    """
    Health check endpoint for load balancer and Docker health checks.

    Does not contact the feed; `feed_configured` only reports whether
    FEED_URL is set.
    """
    return HealthResponse(env=settings.ENV, feed_configured=settings.feed_configured)
