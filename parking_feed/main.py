from contextlib import asynccontextmanager

from fastapi import FastAPI

from parking_feed.api.routes import health, parking
from parking_feed.core.config import settings
from parking_feed.core.logging import get_logger


log = get_logger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info(f"Starting application in {settings.ENV.upper()} mode")
    if settings.is_production:
        log.info("Production mode: Debug disabled, docs disabled, stricter logging")
    else:
        log.info("Development mode: Debug enabled, docs available")

    if not settings.feed_configured:
        log.warning("FEED_URL is not set; /parking will return empty results")

    yield

    log.info("Application shutdown complete")


app = FastAPI(
    title="Parking Feed",
    description="Latest parking spot readings from a ThingSpeak channel feed",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.docs_enabled else None,
    redoc_url="/redoc" if settings.docs_enabled else None,
    openapi_url="/openapi.json" if settings.docs_enabled else None,
    debug=settings.debug_enabled,
)


app.include_router(parking.router)
app.include_router(health.router)
