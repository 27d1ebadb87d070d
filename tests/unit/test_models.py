"""
Unit tests for Pydantic data models.

Tests room keys, reference models, input parsing and output serialization.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from src.core.errors import MalformedInputRowError
from src.core.models import (
    OUTPUT_COLUMNS,
    BookingInput,
    EnrichedBooking,
    Hotel,
    IntegrationResult,
    Room,
    generate_room_key,
)


def make_enriched(**overrides) -> EnrichedBooking:
    fields = {
        "room_type_meal": "EZ F",
        "room_code": "BER898",
        "source": "IHG",
        "hotel_name": "Crowne Plaza Berlin City Centre",
        "city_name": "Berlin",
        "city_code": "BER",
        "hotel_category": 4.0,
        "pax": 3,
        "adults": 2,
        "children": 1,
        "room_name": "Einzelzimmer Superior",
        "checkin": date(2019, 7, 30),
        "checkout": date(2019, 7, 31),
        "price": 30.0,
    }
    fields.update(overrides)
    return EnrichedBooking(**fields)


class TestRoomKey:
    """Tests for generate_room_key"""

    def test_generate_key(self):
        """Test key is the hyphen-joined hotel code, room code and source"""
        assert generate_room_key("HOTEL", "ROOM", "SRC") == "HOTEL-ROOM-SRC"
        assert generate_room_key("aaa", "bbb", "ccc") == "aaa-bbb-ccc"
        assert generate_room_key("000", "111", "222") == "000-111-222"

    def test_key_is_case_sensitive(self):
        assert generate_room_key("Hotel", "room", "SRC") != generate_room_key("HOTEL", "ROOM", "SRC")

    def test_room_key_matches_generated_key(self, berlin_room):
        """Test Room.key() uses the same derivation as lookups"""
        assert berlin_room.key() == generate_room_key("BER00002", "BER898", "IHG")
        assert berlin_room.key() == "BER00002-BER898-IHG"


class TestRoom:
    """Tests for Room model"""

    def test_extra_field_rejected(self):
        with pytest.raises(ValidationError):
            Room(hotel_code="H", source="S", room_name="N", room_code="R", floor="2")

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Room(hotel_code="H", source="S", room_name="N")
        assert "room_code" in str(exc_info.value)


class TestHotel:
    """Tests for Hotel model"""

    def test_valid_hotel_from_json(self):
        """Test parsing a hotel from its JSON line"""
        hotel = Hotel.model_validate_json(
            '{"id": "BER00002", "city_code": "BER", "name": "Crowne Plaza", '
            '"category": 4, "country_code": "DE", "city": "Berlin"}'
        )
        assert hotel.id == "BER00002"
        assert hotel.category == 4.0
        assert isinstance(hotel.category, float)

    def test_extra_field_rejected(self):
        with pytest.raises(ValidationError):
            Hotel.model_validate_json(
                '{"id": "X", "city_code": "BER", "name": "N", "category": 4.0, '
                '"country_code": "DE", "city": "Berlin", "stars": 5}'
            )

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Hotel.model_validate_json('{"id": "X", "city_code": "BER", "name": "N"}')
        assert "category" in str(exc_info.value)


class TestBookingInput:
    """Tests for BookingInput model"""

    def test_valid_row(self, input_row):
        """Test parsing a raw CSV row with string values"""
        booking = BookingInput(**input_row)
        assert booking.checkin == date(2019, 7, 30)
        assert booking.adults == 2
        assert booking.children == 1
        assert booking.price == 90.0

    def test_extra_columns_ignored(self, input_row):
        booking = BookingInput(**input_row, comment="late arrival")
        assert booking.hotel_code == "BER00002"

    @pytest.mark.parametrize("checkin", ["2019-07-30", "20191301", "2019073", "30072019x", ""])
    def test_invalid_checkin(self, input_row, checkin):
        """Test only valid compact dates are accepted"""
        input_row["checkin"] = checkin
        with pytest.raises(ValidationError) as exc_info:
            BookingInput(**input_row)
        assert "checkin" in str(exc_info.value)

    @pytest.mark.parametrize("field,value", [
        ("adults", "-1"),
        ("adults", "256"),
        ("children", "300"),
        ("adults", "two"),
        ("price", "-0.01"),
        ("price", "nan"),
        ("price", "inf"),
        ("price", "ninety"),
    ])
    def test_out_of_range_values(self, input_row, field, value):
        input_row[field] = value
        with pytest.raises(ValidationError) as exc_info:
            BookingInput(**input_row)
        assert field in str(exc_info.value)

    def test_people_bounds_accepted(self, input_row):
        input_row["adults"] = "255"
        input_row["children"] = "0"
        assert BookingInput(**input_row).adults == 255


class TestEnrichedBooking:
    """Tests for EnrichedBooking model"""

    def test_to_row_uses_output_columns(self):
        """Test serialized keys are the output columns in order"""
        assert list(make_enriched().to_row()) == OUTPUT_COLUMNS

    def test_to_row_formats_values(self):
        row = make_enriched(price=8.5).to_row()
        assert row["room_type meal"] == "EZ F"
        assert row["checkin"] == "2019-07-30"
        assert row["checkout"] == "2019-07-31"
        assert row["price"] == "8.50"
        assert row["pax"] == 3
        assert row["hotel_category"] == 4.0

    def test_early_years_zero_padded(self):
        row = make_enriched(checkin=date(1, 1, 1), checkout=date(1, 1, 2)).to_row()
        assert row["checkin"] == "0001-01-01"
        assert row["checkout"] == "0001-01-02"

    def test_frozen(self):
        """Test output values cannot be mutated after creation"""
        booking = make_enriched()
        with pytest.raises(ValidationError):
            booking.price = 1.0


class TestIntegrationResult:
    """Tests for IntegrationResult model"""

    def test_output_result(self):
        result = IntegrationResult(line_number=2, output=make_enriched())
        assert result.ok
        assert result.error is None

    def test_error_result(self):
        result = IntegrationResult(line_number=3, error=MalformedInputRowError(3))
        assert not result.ok
        assert result.output is None

    def test_needs_exactly_one_outcome(self):
        with pytest.raises(ValidationError):
            IntegrationResult(line_number=2)
        with pytest.raises(ValidationError):
            IntegrationResult(line_number=2, output=make_enriched(), error=MalformedInputRowError(2))
