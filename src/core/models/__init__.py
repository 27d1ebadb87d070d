"""
Core data models for the booking enrichment pipeline.

All models use Pydantic for runtime validation and type safety.
"""

from .booking_input import PEOPLE_AMOUNT_MAX, BookingInput
from .enriched_booking import OUTPUT_COLUMNS, EnrichedBooking
from .hotel import Hotel
from .integration_result import IntegrationResult
from .room import Room, generate_room_key

__all__ = [
    "Room",
    "Hotel",
    "BookingInput",
    "EnrichedBooking",
    "IntegrationResult",
    "OUTPUT_COLUMNS",
    "PEOPLE_AMOUNT_MAX",
    "generate_room_key",
]
