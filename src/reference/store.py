"""
In-memory keyed reference store.

Reference data (rooms, hotels) is bulk-imported once before integration
starts and only read afterwards.
"""

from pathlib import Path
from typing import Callable, Generic, Hashable, TypeVar

from src.core.errors import EnrichmentError, ReferenceImportError
from src.observability.logger import get_logger

K = TypeVar("K", bound=Hashable)
E = TypeVar("E")

# A reader turns a file into (key, entry) pairs
Reader = Callable[[Path], list[tuple[K, E]]]

logger = get_logger(__name__)


class ReferenceStore(Generic[K, E]):
    """
    Keyed table of reference entries.

    The parsing of each file format is supplied by a reader function, so a
    store is not tied to one source or format. Entries imported later
    replace entries with the same key.
    """

    def __init__(self, name: str):
        """
        Initialize an empty store.

        Args:
            name: Store name used in logs and errors (e.g. "rooms")
        """
        self.name = name
        self._items: dict[K, E] = {}

    def import_from(self, path: str | Path, reader: Reader) -> int:
        """
        Import entries read from a file.

        The reader parses the whole file before anything is inserted, so a
        failed import leaves the store unchanged.

        Args:
            path: File to import
            reader: Function returning (key, entry) pairs for the file

        Returns:
            Number of entries read from the file

        Raises:
            ReferenceImportError: If the reader fails
        """
        path = Path(path)
        try:
            items = reader(path)
        except EnrichmentError as e:
            raise ReferenceImportError(self.name, path, e) from e

        self._items.update(items)
        logger.info(
            f"Imported {len(items)} {self.name} entries from {path}",
            extra={"store": self.name, "entries": len(items), "total": len(self._items)},
        )
        return len(items)

    def find(self, key: K) -> E | None:
        """Return the entry stored under ``key``, or None."""
        return self._items.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name}, entries={len(self._items)})"
