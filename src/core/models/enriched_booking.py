"""
EnrichedBooking model: a booking joined with its room and hotel.
"""

from datetime import date

from pydantic import BaseModel, Field, field_serializer

from src.core.formats import format_iso_date, format_price
from src.core.models.booking_input import PEOPLE_AMOUNT_MAX

# Serialized column names, in output file order
OUTPUT_COLUMNS = [
    "room_type meal",
    "room_code",
    "source",
    "hotel_name",
    "city_name",
    "city_code",
    "hotel_category",
    "pax",
    "adults",
    "children",
    "room_name",
    "checkin",
    "checkout",
    "price",
]


class EnrichedBooking(BaseModel):
    """
    Denormalized output row, produced once per valid input row.

    Attributes:
        room_type_meal: Room type and meal joined by a space
        room_code: Room code of the matched room
        source: Supplier of the booking
        hotel_name: Name of the matched hotel
        city_name: City of the matched hotel
        city_code: City code from the booking
        hotel_category: Category of the matched hotel
        pax: adults + children
        adults: Number of adults
        children: Number of children
        room_name: Name of the matched room
        checkin: Arrival date
        checkout: Departure date (checkin + 1 day)
        price: Price per person
    """

    room_type_meal: str = Field(..., serialization_alias="room_type meal")
    room_code: str
    source: str
    hotel_name: str
    city_name: str
    city_code: str
    hotel_category: float
    pax: int = Field(..., ge=1, le=PEOPLE_AMOUNT_MAX)
    adults: int
    children: int
    room_name: str
    checkin: date
    checkout: date
    price: float

    @field_serializer("checkin", "checkout")
    def serialize_date(self, value: date) -> str:
        return format_iso_date(value)

    @field_serializer("price")
    def serialize_price(self, value: float) -> str:
        return format_price(value)

    def to_row(self) -> dict[str, object]:
        """Return the booking keyed by output column name."""
        return self.model_dump(mode="json", by_alias=True)

    class Config:
        frozen = True
