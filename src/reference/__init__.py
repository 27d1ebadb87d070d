"""
Reference data stores and their file readers.
"""

from .readers import ROOM_COLUMNS, read_hotels, read_rooms, rooms_reader
from .store import ReferenceStore

__all__ = [
    "ReferenceStore",
    "ROOM_COLUMNS",
    "read_hotels",
    "read_rooms",
    "rooms_reader",
]
