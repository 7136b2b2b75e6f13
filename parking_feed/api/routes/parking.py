"""Parking routes - Latest readings for each parking spot."""

from fastapi import APIRouter, Depends

from parking_feed.api.deps import get_parking_service
from parking_feed.core.logging import get_logger
from parking_feed.schemas.api import ParkingResponse
from parking_feed.services.parking_service import ParkingService

router = APIRouter(prefix="/parking", tags=["parking"])
log = get_logger("parking_routes")


@router.get("", response_model=ParkingResponse)
def get_parking(service: ParkingService = Depends(get_parking_service)):
    """
    Fetch the channel feed once and return one record per parking spot.

    Failures (bad URL, network error, non-200, malformed JSON) are logged
    and reported as an empty `spots` list rather than an error status.
    """
    result = service.fetch()
    if not result.spots:
        log.warning("Serving empty parking response")
    return result
