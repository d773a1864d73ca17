"""
Single-file JSON implementation of DataReader.

The whole collection is stored as one JSON array in one file.
"""

import logging
from typing import List, TypeVar

from dataio.repos.base import DataReaderMixin
from .base import JsonIOBase

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonReader(JsonIOBase[T], DataReaderMixin[T]):
    """Reads every record from a JSON array file.

    A missing file is created empty when ``create_new_file`` is set, and
    raises SourceNotFoundError otherwise. An empty file yields no records;
    malformed content raises SerializationError.
    """

    def read_data(self) -> List[T]:
        items = self._load_array()
        logger.debug(
            f"Read {len(items)} records from JSON file",
            extra={"data_path": str(self.data_path)},
        )
        return items
