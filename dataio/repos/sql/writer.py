"""
SQLAlchemy implementation of DataWriter.

This is the canonical upsert: each record is looked up by primary key
through the session's identity map; a tracked row gets every column value
copied from the incoming record, a missing one is added as a new row. The
session is committed once per call, so a batch is applied completely or,
after a rollback, not at all. A missing table raises SourceNotFoundError.
"""

import logging
from typing import Any, Dict, List, TypeVar

from dataio.repos.base import DataWriterMixin
from .base import SqlIOBase

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlWriter(SqlIOBase[T], DataWriterMixin[T]):
    """Upserts domain records into the mapped table by primary key."""

    def _write_items(self, items: List[Any]) -> None:
        # Rows added earlier in this batch are not in the identity map
        # until flushed
        staged: Dict[Any, Any] = {}
        inserted = 0
        try:
            self._ensure_table()
            for item in items:
                item_id = item.get_id()
                values = self._column_values(item)
                existing = staged.get(item_id)
                if existing is None:
                    existing = self.session.get(self.table_type, item_id)

                if existing is None:
                    row = self.table_type(**values)
                    self.session.add(row)
                    staged[item_id] = row
                    inserted += 1
                else:
                    for key, value in values.items():
                        if key not in self._primary_keys:
                            setattr(existing, key, value)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info(
            "Committed records to database",
            extra={
                "table_type": self.table_type.__name__,
                "written": len(items),
                "inserted": inserted,
            },
        )

    def _column_values(self, item: Any) -> Dict[str, Any]:
        """Model field values that have a matching mapped column."""
        return {
            key: value
            for key, value in item.model_dump().items()
            if key in self._column_keys
        }
