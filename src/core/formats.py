"""
Wire formats shared by the input and output files.

Input dates use the compact ``YYYYMMDD`` form, output dates the ISO
``YYYY-MM-DD`` form. Both are zero padded so years 1-9999 round-trip.
"""

import re
from datetime import date

COMPACT_DATE_PATTERN = re.compile(r"(\d{4})(\d{2})(\d{2})", re.ASCII)
ISO_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


def parse_compact_date(value: str) -> date:
    """
    Parse a ``YYYYMMDD`` date.

    Raises:
        ValueError: If the value is not an eight digit calendar date
    """
    match = COMPACT_DATE_PATTERN.fullmatch(value)
    if not match:
        raise ValueError(f"Date '{value}' is not in YYYYMMDD format")
    year, month, day = (int(part) for part in match.groups())
    return date(year, month, day)


def format_compact_date(value: date) -> str:
    return f"{value.year:04d}{value.month:02d}{value.day:02d}"


def parse_iso_date(value: str) -> date:
    """
    Parse a ``YYYY-MM-DD`` date.

    Raises:
        ValueError: If the value is not a hyphenated calendar date
    """
    match = ISO_DATE_PATTERN.fullmatch(value)
    if not match:
        raise ValueError(f"Date '{value}' is not in YYYY-MM-DD format")
    year, month, day = (int(part) for part in match.groups())
    return date(year, month, day)


def format_iso_date(value: date) -> str:
    # strftime("%Y") drops the padding for years < 1000 on some platforms
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_price(value: float) -> str:
    """Format a price with exactly two decimal digits, e.g. 8.5 -> "8.50"."""
    return f"{value:.2f}"
