"""
Split JSON implementation of DataWriter.

Writing a record overwrites only ``<directory>/<identifier>.json``. There is
no read-before-write and no coordination between records, so concurrent
writes to different identifiers never touch the same file.
"""

import logging
from pathlib import Path
from typing import Any, List, TypeVar

from dataio.repos.base import DataWriterMixin
from dataio.shortcuts import save_json
from .base import JsonIOBase

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonSplitWriter(JsonIOBase[T], DataWriterMixin[T]):
    """Writes each record to its own JSON file named by identifier."""

    def get_file_path(self, item_id: Any) -> Path:
        return self.data_path / f"{item_id}.json"

    def _write_items(self, items: List[Any]) -> None:
        self._ensure_directory()
        for item in items:
            save_json(item, self.get_file_path(item.get_id()), self.serializer)

        logger.info(
            "Wrote records to JSON directory",
            extra={"data_path": str(self.data_path), "written": len(items)},
        )
