"""
Booking enrichment pipeline orchestration.

Coordinates the flow: import references → read input → integrate → write
"""

from pathlib import Path
from typing import Any

from src.batch.integrator import RowIntegrator
from src.batch.readers import BookingCsvReader
from src.batch.writers import EnrichedBookingWriter
from src.core.config import PipelineConfig
from src.core.models import Hotel, Room
from src.observability.logger import get_logger, log_operation
from src.observability.metrics import record_reference_store, run_duration_seconds, track_duration
from src.reference import ReferenceStore, read_hotels, rooms_reader

logger = get_logger(__name__)


class EnrichmentPipeline:
    """
    Orchestrates one enrichment run.

    Flow:
    1. Import hotels and rooms into their reference stores
    2. Read input bookings one row at a time
    3. Join each booking with its room and hotel
    4. Write each enriched booking to the output file

    The run stops at the first row that cannot be integrated. Rows written
    before that row stay in the output file.
    """

    def __init__(self, config: PipelineConfig | None = None):
        """
        Initialize the pipeline.

        Args:
            config: Run settings (defaults if None)
        """
        self.config = config or PipelineConfig()
        self.rooms: ReferenceStore[str, Room] = ReferenceStore("rooms")
        self.hotels: ReferenceStore[str, Hotel] = ReferenceStore("hotels")
        self._references_loaded = False

    def load_references(self) -> None:
        """
        Import hotels and rooms.

        Raises:
            ReferenceImportError: If a reference file is missing or malformed
        """
        with track_duration(run_duration_seconds, phase="import"), \
                log_operation("Importing reference data", logger=logger):
            self.hotels.import_from(self.config.hotels_path, read_hotels)
            record_reference_store(self.hotels.name, len(self.hotels))

            self.rooms.import_from(
                self.config.rooms_path,
                rooms_reader(self.config.rooms_delimiter, self.config.room_columns),
            )
            record_reference_store(self.rooms.name, len(self.rooms))

        self._references_loaded = True

    def process_file(
        self,
        input_path: str | Path | None = None,
        output_path: str | Path | None = None,
    ) -> dict[str, Any]:
        """
        Enrich an input file into an output file.

        Args:
            input_path: Input file (config.input_path if None)
            output_path: Output file (config.output_path if None)

        Returns:
            Dictionary with processing results:
            - total_records: Input rows pulled
            - written_records: Enriched rows written
            - rooms_loaded: Entries in the rooms store
            - hotels_loaded: Entries in the hotels store
            - output_path: Where the output was written

        Raises:
            ReferenceImportError: If reference data cannot be imported
            InvalidPathError: If the input or output file cannot be opened
            IntegrationError: For the first input row that cannot be integrated
            SerializationFailureError: If an enriched row cannot be written
        """
        input_path = Path(input_path or self.config.input_path)
        output_path = Path(output_path or self.config.output_path)

        if not self._references_loaded:
            self.load_references()

        total_records = 0
        with track_duration(run_duration_seconds, phase="integrate"), \
                log_operation("Integrating bookings", logger=logger, input_path=str(input_path)), \
                BookingCsvReader(input_path, self.config.input_delimiter) as reader, \
                EnrichedBookingWriter(output_path, self.config.output_delimiter) as writer:
            for result in RowIntegrator(self.rooms, self.hotels, reader):
                total_records += 1
                if not result.ok:
                    logger.error(
                        f"Aborting run at input line {result.line_number}, "
                        f"{writer.records_written} rows were written to {output_path}"
                    )
                    raise result.error
                writer.write(result.output)

        logger.info(f"Wrote {writer.records_written} enriched bookings to {output_path}")

        return {
            "total_records": total_records,
            "written_records": writer.records_written,
            "rooms_loaded": len(self.rooms),
            "hotels_loaded": len(self.hotels),
            "output_path": str(output_path),
        }
