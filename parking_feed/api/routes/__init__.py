from parking_feed.api.routes.health import router as health_router
from parking_feed.api.routes.parking import router as parking_router

__all__ = ["health_router", "parking_router"]
