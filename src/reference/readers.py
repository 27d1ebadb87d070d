"""
Readers for the reference data files.

Each reader is a plain function: path in, list of (key, entry) pairs out.
"""

import csv
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from src.core.errors import InvalidPathError, MalformedReferenceEntryError
from src.core.models import Hotel, Room

# Column order of the headerless rooms file
ROOM_COLUMNS = ("hotel_code", "source", "room_name", "room_code")


def read_hotels(path: Path) -> list[tuple[str, Hotel]]:
    """
    Read hotels from a file holding one JSON object per line.

    The file as a whole is not valid JSON, each line is. Blank lines are
    skipped.

    Args:
        path: Path to the hotels file

    Returns:
        (hotel id, Hotel) pairs in file order

    Raises:
        InvalidPathError: If the file cannot be read
        MalformedReferenceEntryError: If a line is not a valid hotel
    """
    try:
        text = Path(path).read_bytes().decode("utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidPathError(path, "Path to the hotels data is invalid!") from e

    hotels = []
    # Split on \n only, JSON strings may hold U+2028 and similar raw
    for line in text.split("\n"):
        line = line.rstrip("\r")
        if not line.strip():
            continue
        try:
            hotel = Hotel.model_validate_json(line)
        except ValidationError as e:
            raise MalformedReferenceEntryError(
                f"Encountered unparsable entity during parsing hotels data at line: {line}"
            ) from e
        hotels.append((hotel.id, hotel))
    return hotels


def read_rooms(
    path: Path,
    delimiter: str = "|",
    columns: Sequence[str] = ROOM_COLUMNS,
) -> list[tuple[str, Room]]:
    """
    Read rooms from a headerless delimited file.

    Args:
        path: Path to the rooms file
        delimiter: Field delimiter
        columns: Room field held by each column, in column order

    Returns:
        (room key, Room) pairs in file order

    Raises:
        InvalidPathError: If the file cannot be opened
        MalformedReferenceEntryError: If a row is not a valid room
    """
    try:
        f = open(path, newline="", encoding="utf-8-sig")
    except OSError as e:
        raise InvalidPathError(path, "Path to the rooms data is invalid!") from e

    rooms = []
    with f:
        try:
            for row in csv.reader(f, delimiter=delimiter):
                if not row:
                    continue
                if len(row) != len(columns):
                    raise ValueError(f"expected {len(columns)} columns, got {len(row)}")
                room = Room(**dict(zip(columns, row)))
                rooms.append((room.key(), room))
        except (ValueError, csv.Error) as e:
            raise MalformedReferenceEntryError(
                "Encountered unparsable entity during parsing rooms data."
            ) from e
    return rooms


def rooms_reader(delimiter: str = "|", columns: Sequence[str] = ROOM_COLUMNS):
    """Bind delimiter and column order into a reader for ReferenceStore.import_from."""

    def reader(path: Path) -> list[tuple[str, Room]]:
        return read_rooms(path, delimiter=delimiter, columns=columns)

    return reader
