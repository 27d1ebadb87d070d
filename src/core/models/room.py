"""
Room reference model and its composite lookup key.
"""

from pydantic import BaseModel


def generate_room_key(hotel_code: str, room_code: str, source: str) -> str:
    """
    Build the key a room is stored under.

    Bookings only carry hotel code, room code and source, so the three are
    joined with hyphens (case-sensitive, in that order) to tell apart rooms
    that share some of them.

    Examples:
        >>> generate_room_key("HOTEL", "ROOM", "SRC")
        'HOTEL-ROOM-SRC'
    """
    return f"{hotel_code}-{room_code}-{source}"


class Room(BaseModel):
    """
    A room offered by a hotel through a given source.

    Attributes:
        hotel_code: Code of the hotel the room belongs to
        source: Supplier the room data came from
        room_name: Human readable room name
        room_code: Supplier code of the room
    """

    hotel_code: str
    source: str
    room_name: str
    room_code: str

    def key(self) -> str:
        return generate_room_key(self.hotel_code, self.room_code, self.source)

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "hotel_code": "BER00003",
                "source": "MARR",
                "room_name": "Single Standard",
                "room_code": "BER849",
            }
        }
