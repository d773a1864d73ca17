"""
Reader and writer protocols shared by every storage backend.

Calling code depends on these protocols rather than on a concrete adapter,
so the storage medium behind an entity type can change without touching the
caller. All implementations follow the same principles:

- **Bound type**: each adapter instance is parameterized once with the
  entity type it serves. Polymorphic entry points (``read_data_as``,
  ``write_data_as``) check the requested type against the bound type at the
  call boundary and raise ``UnsupportedTypeError`` on mismatch, never
  returning an empty result instead.

- **Upsert by identity**: writers locate existing records by identifier,
  merge incoming values onto them, and insert records that are not found.
  Within one call items are applied in caller order, so the last write for
  an identifier wins.

- **Cancellation signal**: async variants accept an optional
  ``asyncio.Event``. When an operation fails the event is set before the
  error propagates, so callers chaining dependent work can observe the
  failure. The event is an output only; it never interrupts in-flight work.
"""

import asyncio
from typing import (
    Any,
    Iterable,
    List,
    Optional,
    Protocol,
    Type,
    TypeVar,
    runtime_checkable,
)

T = TypeVar("T")
U = TypeVar("U")


@runtime_checkable
class DataReader(Protocol[T]):
    """Enumerates persisted records of a bound entity type."""

    def get_source_name(self) -> str:
        """Return a descriptive label for the storage medium."""
        ...

    def read_data(self) -> List[T]:
        """Return every persisted record of the bound type.

        Implementation Notes:
        - Must not mutate backend state, apart from the configured
          auto-creation of an empty source
        - Raises SourceNotFoundError when the source is missing and
          auto-creation is disabled
        """
        ...

    def read_data_as(self, data_type: Type[U]) -> List[U]:
        """Return every persisted record viewed as ``data_type``.

        Raises:
            UnsupportedTypeError: If ``data_type`` is not the bound type,
                one of its base classes, or a backend-specific view
        """
        ...

    async def read_data_async(
        self, cancellation: Optional[asyncio.Event] = None
    ) -> List[T]:
        """Async variant of read_data."""
        ...

    async def read_data_as_async(
        self,
        data_type: Type[U],
        cancellation: Optional[asyncio.Event] = None,
    ) -> List[U]:
        """Async variant of read_data_as."""
        ...


@runtime_checkable
class DataWriter(Protocol[T]):
    """Upserts records of a bound entity type."""

    def get_source_name(self) -> str:
        """Return a descriptive label for the storage medium."""
        ...

    def write_data(self, item: T) -> bool:
        """Upsert a single record.

        Returns:
            True on success. False only when the writer is configured to
            handle inner exceptions and the write failed.
        """
        ...

    def write_data_list(self, items: Iterable[T]) -> bool:
        """Upsert a batch of records in caller order."""
        ...

    def write_data_as(self, item: Any) -> bool:
        """Upsert a loosely typed record after a runtime type check.

        Raises:
            UnsupportedTypeError: If ``item`` is not an instance of the
                bound type
        """
        ...

    def write_data_list_as(self, items: Iterable[Any]) -> bool:
        """Upsert a loosely typed batch after checking every item."""
        ...

    async def write_data_async(
        self, item: T, cancellation: Optional[asyncio.Event] = None
    ) -> bool:
        ...

    async def write_data_list_async(
        self,
        items: Iterable[T],
        cancellation: Optional[asyncio.Event] = None,
    ) -> bool:
        ...

    async def write_data_as_async(
        self, item: Any, cancellation: Optional[asyncio.Event] = None
    ) -> bool:
        ...

    async def write_data_list_as_async(
        self,
        items: Iterable[Any],
        cancellation: Optional[asyncio.Event] = None,
    ) -> bool:
        ...
