"""
Lazy CSV reader for the incomplete booking input file.
"""

import csv
from pathlib import Path
from typing import Iterator

from src.core.errors import InvalidPathError
from src.observability.logger import get_logger

logger = get_logger(__name__)

# A row that could not be framed into header-keyed fields is yielded as None
RawRow = dict[str, str] | None


class BookingCsvReader:
    """
    Reads the delimited input file one row at a time.

    Rows are keyed by the header line. Nothing is read ahead: each step of
    iteration pulls exactly one record from the file.

    Usage:
        with BookingCsvReader("input.csv") as reader:
            for line_number, row in reader:
                ...
    """

    def __init__(self, file_path: str | Path, delimiter: str = "|"):
        """
        Initialize the reader.

        Args:
            file_path: Path to the input file
            delimiter: Field delimiter
        """
        self.file_path = Path(file_path)
        self.delimiter = delimiter
        self._file = None

    def __enter__(self):
        try:
            self._file = open(self.file_path, newline="", encoding="utf-8-sig")
        except OSError as e:
            raise InvalidPathError(self.file_path, "Path to the input data is invalid!") from e
        logger.debug(f"Opened input file {self.file_path}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._file is not None:
            self._file.close()
            self._file = None
        return False

    def __iter__(self) -> Iterator[tuple[int, RawRow]]:
        """
        Yield (line number, row) pairs.

        A row whose field count differs from the header, or that the csv
        module cannot parse, is yielded as None.
        """
        if self._file is None:
            raise RuntimeError("BookingCsvReader must be used as a context manager")

        reader = csv.DictReader(self._file, delimiter=self.delimiter)
        while True:
            try:
                row = next(reader)
            except StopIteration:
                return
            except csv.Error as e:
                logger.warning(f"Unparsable input record at line {reader.line_num}: {e}")
                yield reader.line_num, None
                continue
            except UnicodeDecodeError as e:
                # The decoder cannot resume mid-stream, nothing after this is readable
                logger.warning(f"Input is not valid UTF-8 after line {reader.line_num}: {e}")
                yield reader.line_num + 1, None
                return

            yield reader.line_num, _frame_row(row)


def _frame_row(row: dict) -> RawRow:
    # DictReader keys surplus fields under None and fills missing ones with None
    if None in row or any(value is None for value in row.values()):
        return None
    return row
