"""Parking feed pipeline: fetch the channel feed, parse its latest entry, build display records."""

from __future__ import annotations

from typing import List, Optional

from pydantic import ValidationError

from parking_feed.core.config import settings
from parking_feed.core.logging import get_logger
from parking_feed.ingestion.base import BaseSource
from parking_feed.ingestion.thingspeak_source import ThingSpeakSource
from parking_feed.schemas.api import ParkingResponse
from parking_feed.schemas.feed import FeedDocument, FeedEntry
from parking_feed.schemas.parking import ParkingSpot

log = get_logger("parking_service")


def extract_latest_entry(json_text: Optional[str]) -> Optional[FeedEntry]:
    """Parse the feed document and return its most recent entry, or None."""
    if not json_text:
        log.debug("Empty feed body; nothing to parse")
        return None

    try:
        document = FeedDocument.model_validate_json(json_text)
        if not document.feeds:
            log.error("Problem parsing the parking feed JSON results: 'feeds' is empty")
            return None
        return FeedEntry.model_validate(document.feeds[-1])
    except ValidationError as exc:
        log.opt(exception=exc).error("Problem parsing the parking feed JSON results")
        return None


def build_parking_spots(entry: FeedEntry) -> List[ParkingSpot]:
    """One record per field, in field order, sharing the configured time and URL."""
    readings = [entry.field1, entry.field2, entry.field3]
    return [
        ParkingSpot(
            reading=reading,
            location=label,
            time=settings.SPOT_TIMESTAMP,
            url=settings.SPOT_URL,
        )
        for reading, label in zip(readings, settings.SPOT_LABELS, strict=True)
    ]


def extract_parking_spots(json_text: Optional[str]) -> List[ParkingSpot]:
    entry = extract_latest_entry(json_text)
    if entry is None:
        return []
    return build_parking_spots(entry)


def fetch_parking_data(request_url: str) -> List[ParkingSpot]:
    """Query the feed URL and return the parking spots; empty on any failure."""
    return ParkingService(ThingSpeakSource(request_url)).fetch().spots


class ParkingService:
    """Runs the fetch-and-parse pipeline against a single source."""

    def __init__(self, source: BaseSource):
        self.source = source

    def fetch(self) -> ParkingResponse:
        log.info(f"Fetching parking data from source={self.source.name}")
        body = self.source.fetch()

        entry = extract_latest_entry(body)
        if entry is None:
            log.warning(f"No parking data available from source={self.source.name}")
            return ParkingResponse(count=0, spots=[])

        spots = build_parking_spots(entry)
        log.info(f"Built {len(spots)} parking spots from entry_id={entry.entry_id}")
        return ParkingResponse(
            entry_id=entry.entry_id,
            created_at=entry.created_at,
            count=len(spots),
            spots=spots,
        )
