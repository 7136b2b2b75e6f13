"""Display record built from one feed field."""

from pydantic import BaseModel, ConfigDict


class ParkingSpot(BaseModel):
    """One parking spot reading, ready for display."""

    model_config = ConfigDict(frozen=True)

    reading: float
    location: str
    time: int
    url: str
