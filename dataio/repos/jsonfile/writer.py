"""
Single-file JSON implementation of DataWriter.

Each call reads the current array, merges the incoming records onto the
stored ones (appending unknown identifiers) and rewrites the whole file
once. A crash during the rewrite can leave a truncated file; callers needing
stronger guarantees should use the split or relational adapters.
"""

import logging
from typing import Any, List, Optional, TypeVar

from dataio.repos.base import DataWriterMixin
from .base import JsonIOBase

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonWriter(JsonIOBase[T], DataWriterMixin[T]):
    """Upserts records into a JSON array file by identifier."""

    def _write_items(self, items: List[Any]) -> None:
        stored = self._load_array()
        inserted = 0
        for item in items:
            index = self._find_index(stored, item)
            if index is None:
                # Copied so later merges in the batch leave caller objects alone
                stored.append(item.model_copy())
                inserted += 1
            else:
                stored[index].merge_from(item)
        self._dump_array(stored)

        logger.info(
            "Wrote records to JSON file",
            extra={
                "data_path": str(self.data_path),
                "written": len(items),
                "inserted": inserted,
                "total": len(stored),
            },
        )

    @staticmethod
    def _find_index(stored: List[Any], item: Any) -> Optional[int]:
        """Position of the first stored record sharing ``item``'s id."""
        item_id = item.get_id()
        for index, existing in enumerate(stored):
            if existing.get_id() == item_id:
                return index
        return None
