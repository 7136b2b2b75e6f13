# Services package
from parking_feed.services.parking_service import (
    ParkingService,
    build_parking_spots,
    extract_latest_entry,
    extract_parking_spots,
    fetch_parking_data,
)

__all__ = [
    "ParkingService",
    "build_parking_spots",
    "extract_latest_entry",
    "extract_parking_spots",
    "fetch_parking_data",
]
