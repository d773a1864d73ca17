"""
SQLAlchemy implementation of DataReader.
"""

import logging
from typing import List, TypeVar

from sqlalchemy import select

from dataio.repos.base import DataReaderMixin
from .base import SqlIOBase

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlReader(SqlIOBase[T], DataReaderMixin[T]):
    """Reads every row of the mapped table as domain records."""

    def read_data(self) -> List[T]:
        self._ensure_table()
        rows = self.session.scalars(select(self.table_type)).all()
        items = [
            self.model_type.model_validate(row, from_attributes=True)
            for row in rows
        ]
        logger.debug(
            f"Read {len(items)} records from database",
            extra={"table_type": self.table_type.__name__},
        )
        return items
