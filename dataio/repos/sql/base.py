"""
Common configuration for the relational adapters.

The adapters wrap an externally owned SQLAlchemy ``Session``. Domain records
are Pydantic models; ``table_type`` is the declarative ORM class that maps
them to a table. Columns are matched to model fields by name.
"""

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from dataio.errors import SourceNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlIOBase(Generic[T]):
    """Holds the ORM session and the model/table pair of a relational
    source."""

    source_name: str = "DataBase Context"

    # Sessions are bound to one thread; run async variants inline
    offload_io = False

    def __init__(
        self,
        session: Session,
        model_type: Type[T],
        table_type: Type[Any],
        handle_inner_exceptions: bool = False,
        source_name: Optional[str] = None,
    ) -> None:
        """
        Args:
            session: SQLAlchemy session owned by the caller
            model_type: Pydantic record type served by this adapter
            table_type: Declarative ORM class storing ``model_type``
            handle_inner_exceptions: Report write failures as ``False``
                instead of raising
            source_name: Label overriding the process-wide source name
        """
        if session is None:
            raise ValueError("session is required")
        if model_type is None or table_type is None:
            raise ValueError("model_type and table_type are required")

        self.session = session
        self.model_type = model_type
        self.table_type = table_type
        self.handle_inner_exceptions = handle_inner_exceptions
        if source_name is not None:
            self.source_name = source_name

        mapper = inspect(table_type)
        self._table = mapper.local_table
        self._column_keys: List[str] = [
            attr.key for attr in mapper.column_attrs
        ]
        self._primary_keys: List[str] = [
            mapper.get_property_by_column(column).key
            for column in mapper.primary_key
        ]

        logger.debug(
            f"Initialized {type(self).__name__}",
            extra={
                "model_type": model_type.__name__,
                "table": mapper.local_table.name,
            },
        )

    def _ensure_table(self) -> None:
        """Make sure the mapped table exists in the session's database.

        The check runs on the session's own connection, so it sees tables
        created inside the current transaction.

        Raises:
            SourceNotFoundError: If the table is missing; the error lists the
                available tables
        """
        inspector = inspect(self.session.connection())
        if inspector.has_table(self._table.name, schema=self._table.schema):
            return
        raise SourceNotFoundError(
            f"Table '{self._table.name}' not found in database",
            source=self._table.name,
            available=inspector.get_table_names(schema=self._table.schema),
        )
