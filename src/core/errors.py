"""
Exception hierarchy for the booking enrichment pipeline.

Each failure site raises a specific error type carrying the context needed
to report it (path, raw line, offending booking, line number).
"""

from typing import Any


class EnrichmentError(Exception):
    """Base exception for all enrichment failures."""


class ConfigError(EnrichmentError):
    """Raised for invalid pipeline configuration."""


class InvalidPathError(EnrichmentError):
    """Raised when a reference, input or output file cannot be opened."""

    def __init__(self, path: Any, message: str):
        self.path = str(path)
        super().__init__(f"{message} ({self.path})")


class MalformedReferenceEntryError(EnrichmentError):
    """Raised when a line or row of reference data cannot be parsed."""


class ReferenceImportError(EnrichmentError):
    """
    Raised when importing a reference file into a store fails.

    Wraps the reader's failure, which stays available as ``cause``.
    """

    def __init__(self, store_name: str, path: Any, cause: Exception):
        self.store_name = store_name
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Failed to import {store_name} from {self.path}: {cause}")


class SerializationFailureError(EnrichmentError):
    """Raised when an enriched booking cannot be written to the output."""


class IntegrationError(EnrichmentError):
    """Base class for failures tied to a single input row."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        super().__init__(message)


class MalformedInputRowError(IntegrationError):
    """Raised when an input row does not match the booking shape."""

    def __init__(self, line_number: int | None = None):
        location = f" (line {line_number})" if line_number is not None else ""
        super().__init__(
            f"Input contains data that can't be deserialized!{location}",
            line_number=line_number,
        )


class MissingReferenceError(IntegrationError):
    """Raised when a booking links to reference data that does not exist."""

    reference_kind = "reference"

    def __init__(self, booking: Any, line_number: int | None = None):
        self.booking = booking
        super().__init__(
            f"Input links to a non existent {self.reference_kind}: {booking!r}",
            line_number=line_number,
        )


class MissingRoomReferenceError(MissingReferenceError):
    """No room is stored under the booking's composite room key."""

    reference_kind = "room"


class MissingHotelReferenceError(MissingReferenceError):
    """No hotel is stored under the booking's hotel code."""

    reference_kind = "hotel"


class DerivationError(IntegrationError):
    """Raised when derived output fields cannot be computed for a booking."""


class PaxOverflowError(DerivationError):
    """adults + children exceeds the supported party size."""


class ZeroPaxError(DerivationError):
    """A booking with no guests has no per-person price."""


class CheckoutOutOfRangeError(DerivationError):
    """checkin + 1 day falls outside the supported calendar."""
