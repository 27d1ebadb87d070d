"""
BookingInput model for a single incomplete booking row (ephemeral).
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from src.core.formats import parse_compact_date

# Largest party a single booking row can describe
PEOPLE_AMOUNT_MAX = 255


class BookingInput(BaseModel):
    """
    One booking fragment read from the input file.

    Attributes:
        city_code: Code of the destination city
        hotel_code: Code of the booked hotel
        room_type: Room type label, e.g. "EZ"
        room_code: Supplier code of the room
        meal: Meal plan label, e.g. "F"
        checkin: Arrival date (``YYYYMMDD`` on the wire)
        adults: Number of adults
        children: Number of children
        price: Total price of the stay
        source: Supplier the booking came from
    """

    city_code: str
    hotel_code: str
    room_type: str
    room_code: str
    meal: str
    checkin: date
    adults: int = Field(..., ge=0, le=PEOPLE_AMOUNT_MAX)
    children: int = Field(..., ge=0, le=PEOPLE_AMOUNT_MAX)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    source: str

    @field_validator("checkin", mode="before")
    @classmethod
    def parse_checkin(cls, v):
        """Accept compact YYYYMMDD strings as they appear in the input file."""
        if isinstance(v, str):
            return parse_compact_date(v)
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "city_code": "BER",
                "hotel_code": "BER00002",
                "room_type": "EZ",
                "room_code": "BER898",
                "meal": "F",
                "checkin": "20180721",
                "adults": 1,
                "children": 0,
                "price": 85.50,
                "source": "IHG",
            }
        }
