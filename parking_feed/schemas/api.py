from typing import Literal

from pydantic import BaseModel

from parking_feed.schemas.parking import ParkingSpot


class ParkingResponse(BaseModel):
    entry_id: str | None = None
    created_at: str | None = None
    count: int
    spots: list[ParkingSpot]


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    env: str
    feed_configured: bool
