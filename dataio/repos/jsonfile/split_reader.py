"""
Split JSON implementation of DataReader.

Each record lives in its own ``<directory>/<identifier>.json`` file. Files
are read independently, so one corrupt record does not hide the others.
"""

import logging
from typing import List, TypeVar

from dataio.errors import DataIOError
from dataio.repos.base import DataReaderMixin
from dataio.shortcuts import load_json
from .base import JsonIOBase

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonSplitReader(JsonIOBase[T], DataReaderMixin[T]):
    """Reads one record per JSON file from a directory.

    Files that cannot be read or validated are logged and skipped.
    """

    def read_data(self) -> List[T]:
        self._ensure_directory()

        items: List[T] = []
        skipped = 0
        for record_file in sorted(self.data_path.glob("*.json")):
            if not record_file.is_file():
                continue
            try:
                items.append(
                    load_json(record_file, self.model_type, self.serializer)
                )
            except DataIOError:
                skipped += 1
                logger.warning(
                    f"Could not read or parse record file: {record_file}",
                    exc_info=True,
                )

        logger.debug(
            f"Read {len(items)} records from JSON directory",
            extra={"data_path": str(self.data_path), "skipped": skipped},
        )
        return items
