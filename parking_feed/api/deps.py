"""API dependencies"""

from parking_feed.core.config import settings
from parking_feed.ingestion.thingspeak_source import ThingSpeakSource
from parking_feed.services.parking_service import ParkingService


def get_parking_service() -> ParkingService:
    """Parking service bound to the configured feed URL"""
    return ParkingService(ThingSpeakSource(settings.FEED_URL))
