"""
CSV writer for enriched bookings.

Writes one row per call so the full output is never held in memory.
"""

import csv
from pathlib import Path

from pydantic_core import PydanticSerializationError

from src.core.errors import InvalidPathError, SerializationFailureError
from src.core.models import OUTPUT_COLUMNS, EnrichedBooking


class EnrichedBookingWriter:
    """
    Writes enriched bookings to a delimited file with a header row.

    The header is written together with the first booking, so a run that
    produces no bookings leaves an empty file.

    Usage:
        with EnrichedBookingWriter("output.csv") as writer:
            writer.write(booking)
    """

    def __init__(self, file_path: str | Path, delimiter: str = ";"):
        """
        Initialize the writer.

        Args:
            file_path: Path of the output file, created or truncated on open
            delimiter: Field delimiter
        """
        self.file_path = Path(file_path)
        self.delimiter = delimiter
        self.records_written = 0
        self._file = None
        self._writer = None

    def __enter__(self):
        try:
            self._file = open(self.file_path, "w", newline="", encoding="utf-8")
        except OSError as e:
            raise InvalidPathError(self.file_path, "Path to the output file is invalid!") from e
        self._writer = csv.DictWriter(
            self._file,
            fieldnames=OUTPUT_COLUMNS,
            delimiter=self.delimiter,
            lineterminator="\n",
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._file is not None:
            self._file.close()
            self._file = None
            self._writer = None
        return False

    def write(self, booking: EnrichedBooking) -> None:
        """
        Append one booking to the output.

        Args:
            booking: The booking to write

        Raises:
            SerializationFailureError: If the booking cannot be serialized or written
        """
        if self._writer is None:
            raise RuntimeError("EnrichedBookingWriter must be used as a context manager")

        try:
            row = booking.to_row()
            if self.records_written == 0:
                self._writer.writeheader()
            self._writer.writerow(row)
        except (PydanticSerializationError, ValueError, TypeError, csv.Error, OSError) as e:
            raise SerializationFailureError(f"Couldn't serialize {booking!r}: {e}") from e

        self.records_written += 1
