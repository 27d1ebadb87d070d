"""
Input data readers.
"""

from .booking_reader import BookingCsvReader, RawRow

__all__ = [
    "BookingCsvReader",
    "RawRow",
]
