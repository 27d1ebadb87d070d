"""
Booking enrichment batch processing module.
"""

from .integrator import RowIntegrator
from .pipeline import EnrichmentPipeline
from .readers import BookingCsvReader
from .writers import EnrichedBookingWriter

__all__ = [
    "EnrichmentPipeline",
    "RowIntegrator",
    "BookingCsvReader",
    "EnrichedBookingWriter",
]
