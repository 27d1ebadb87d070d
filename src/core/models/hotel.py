"""
Hotel reference model.
"""

from pydantic import BaseModel


class Hotel(BaseModel):
    """
    Hotel metadata keyed by ``id``.

    Attributes:
        id: Hotel code, matches ``hotel_code`` of bookings and rooms
        city_code: Code of the city the hotel is in
        name: Hotel name
        category: Star rating, e.g. 4.0 or 4.5
        country_code: ISO country code
        city: City name
    """

    id: str
    city_code: str
    name: str
    category: float
    country_code: str
    city: str

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "id": "BER00002",
                "city_code": "BER",
                "name": "Crowne Plaza Berlin City Centre",
                "category": 4.0,
                "country_code": "DE",
                "city": "Berlin",
            }
        }
