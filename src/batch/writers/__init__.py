"""
Output data writers.
"""

from .enriched_writer import EnrichedBookingWriter

__all__ = [
    "EnrichedBookingWriter",
]
