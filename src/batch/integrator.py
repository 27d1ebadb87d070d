"""
Row integrator: joins incomplete bookings with room and hotel reference data.

Works as a lazy, single-pass iterator. Each step pulls one input row,
enriches it and hands back one IntegrationResult, so input of any size is
processed with a working set of a single row.
"""

from datetime import timedelta
from typing import Iterable, Iterator

from pydantic import ValidationError

from src.batch.readers import RawRow
from src.core.errors import (
    CheckoutOutOfRangeError,
    IntegrationError,
    MalformedInputRowError,
    MissingHotelReferenceError,
    MissingRoomReferenceError,
    PaxOverflowError,
    ZeroPaxError,
)
from src.core.models import (
    PEOPLE_AMOUNT_MAX,
    BookingInput,
    EnrichedBooking,
    Hotel,
    IntegrationResult,
    Room,
    generate_room_key,
)
from src.observability.logger import get_logger
from src.observability.metrics import record_enriched_row, record_failed_row
from src.reference import ReferenceStore

logger = get_logger(__name__)


class RowIntegrator:
    """
    Enriches input rows with data about their room and hotel.

    For every row the room is looked up by its composite key and the hotel
    by its code. Rows linking to a missing room or hotel, rows that cannot
    be parsed and rows whose derived fields cannot be computed produce an
    error result; the iterator itself never raises for a bad row, the
    consumer decides whether to continue.

    The reference stores must be fully imported before iteration starts.
    """

    def __init__(
        self,
        rooms: ReferenceStore[str, Room],
        hotels: ReferenceStore[str, Hotel],
        rows: Iterable[tuple[int, RawRow]],
    ):
        """
        Initialize the integrator.

        Args:
            rooms: Rooms keyed by generate_room_key
            hotels: Hotels keyed by id
            rows: (line number, raw row) pairs, e.g. from BookingCsvReader
        """
        self.rooms = rooms
        self.hotels = hotels
        self._rows = iter(rows)

    def __iter__(self) -> Iterator[IntegrationResult]:
        return self

    def __next__(self) -> IntegrationResult:
        line_number, row = next(self._rows)

        try:
            booking = self.parse_row(row, line_number)
            output = self.enrich(booking, line_number)
        except IntegrationError as e:
            logger.error(
                f"Failed to integrate input line {line_number}: {e}",
                extra={"line_number": line_number, "error_type": type(e).__name__},
            )
            record_failed_row(e)
            return IntegrationResult(line_number=line_number, error=e)

        record_enriched_row()
        return IntegrationResult(line_number=line_number, output=output)

    @staticmethod
    def parse_row(row: RawRow, line_number: int | None = None) -> BookingInput:
        """
        Parse a raw input row into a booking.

        Raises:
            MalformedInputRowError: If the row does not match the booking shape
        """
        if row is None:
            raise MalformedInputRowError(line_number)
        try:
            return BookingInput(**row)
        except (ValidationError, TypeError) as e:
            raise MalformedInputRowError(line_number) from e

    def enrich(self, booking: BookingInput, line_number: int | None = None) -> EnrichedBooking:
        """
        Join a booking with its room and hotel and compute derived fields.

        Args:
            booking: Parsed input booking
            line_number: Input line, for error context

        Returns:
            The enriched booking

        Raises:
            MissingRoomReferenceError: If no room matches the booking
            MissingHotelReferenceError: If no hotel matches the booking
            PaxOverflowError: If adults + children exceeds PEOPLE_AMOUNT_MAX
            ZeroPaxError: If the booking has no guests
            CheckoutOutOfRangeError: If the checkout date does not exist
        """
        room_key = generate_room_key(booking.hotel_code, booking.room_code, booking.source)
        room = self.rooms.find(room_key)
        if room is None:
            raise MissingRoomReferenceError(booking, line_number)

        hotel = self.hotels.find(booking.hotel_code)
        if hotel is None:
            raise MissingHotelReferenceError(booking, line_number)

        # number of adults and children combined
        pax = booking.adults + booking.children
        if pax > PEOPLE_AMOUNT_MAX:
            raise PaxOverflowError(
                f"Party of {pax} exceeds the maximum of {PEOPLE_AMOUNT_MAX}: {booking!r}",
                line_number=line_number,
            )
        if pax == 0:
            raise ZeroPaxError(
                f"Booking has no guests, price per person is undefined: {booking!r}",
                line_number=line_number,
            )

        try:
            checkout = booking.checkin + timedelta(days=1)
        except OverflowError as e:
            raise CheckoutOutOfRangeError(
                f"Checkout after {booking.checkin.isoformat()} is out of range: {booking!r}",
                line_number=line_number,
            ) from e

        return EnrichedBooking(
            room_type_meal=f"{booking.room_type} {booking.meal}",
            room_code=room.room_code,
            source=booking.source,
            hotel_name=hotel.name,
            city_name=hotel.city,
            city_code=booking.city_code,
            hotel_category=hotel.category,
            pax=pax,
            adults=booking.adults,
            children=booking.children,
            room_name=room.room_name,
            checkin=booking.checkin,
            checkout=checkout,
            price=booking.price / pax,
        )
