"""Raw feed schemas (ThingSpeak channel feed JSON)."""

from typing import Annotated, Any, List

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("boolean is not a field reading")
    return value


# Number or numeric string; JSON true/false are not readings
FieldReading = Annotated[float, BeforeValidator(_reject_bool)]


class FeedEntry(BaseModel):
    """A single observation from the `feeds` array.

    ThingSpeak serves field values as strings ("12.5") and `entry_id` as an
    integer; both are coerced here.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    field1: FieldReading
    field2: FieldReading
    field3: FieldReading
    created_at: str
    entry_id: str
