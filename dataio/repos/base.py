"""
Shared reader/writer machinery for every storage backend.

Concrete adapters implement a single primitive each (``read_data`` for
readers, ``_write_items`` for writers). The mixins in this module derive the
rest of the ``DataReader`` / ``DataWriter`` protocols from that primitive:

- the runtime type check behind ``read_data_as`` / ``write_data_as``,
- the error policy selected by ``handle_inner_exceptions``,
- async variants with the cancellation-signal contract, offloading blocking
  I/O to a worker thread when ``offload_io`` is set.
"""

import asyncio
import functools
import logging
from abc import ABC, abstractmethod
from typing import (
    Any,
    Callable,
    ClassVar,
    Generic,
    Iterable,
    List,
    Optional,
    Tuple,
    Type,
    TypeVar,
)

from dataio.errors import UnsupportedTypeError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class AsyncIOMixin(ABC):
    """Runs sync operations for the async API of an adapter."""

    # Blocking backends are moved off the event loop. Adapters whose
    # backend handle is bound to one thread (ORM sessions) run inline.
    offload_io: ClassVar[bool] = True

    async def _run_async(
        self,
        operation: Callable[[], R],
        cancellation: Optional[asyncio.Event],
    ) -> R:
        """Run ``operation`` and signal ``cancellation`` if it fails.

        A missing event is replaced by a private one, so the signal is
        simply dropped. A ``False`` result counts as a failure too.
        """
        if cancellation is None:
            cancellation = asyncio.Event()
        try:
            if self.offload_io:
                result = await asyncio.to_thread(operation)
            else:
                result = operation()
        except Exception:
            cancellation.set()
            raise
        if result is False:
            cancellation.set()
        return result


class DataReaderMixin(AsyncIOMixin, Generic[T]):
    """Derives the polymorphic and async reader API from ``read_data``."""

    model_type: Type[T]
    source_name: str

    def get_source_name(self) -> str:
        return self.source_name

    def supported_types(self) -> Tuple[type, ...]:
        """Types accepted by ``read_data_as`` besides base classes."""
        return (self.model_type,)

    @abstractmethod
    def read_data(self) -> List[T]:
        """Return every persisted record; implemented by each adapter."""
        ...

    def read_data_as(self, data_type: Type[Any]) -> List[Any]:
        if isinstance(data_type, type) and issubclass(
            self.model_type, data_type
        ):
            return list(self.read_data())
        raise UnsupportedTypeError(data_type, self.supported_types())

    async def read_data_async(
        self, cancellation: Optional[asyncio.Event] = None
    ) -> List[T]:
        return await self._run_async(self.read_data, cancellation)

    async def read_data_as_async(
        self,
        data_type: Type[Any],
        cancellation: Optional[asyncio.Event] = None,
    ) -> List[Any]:
        return await self._run_async(
            functools.partial(self.read_data_as, data_type), cancellation
        )


class DataWriterMixin(AsyncIOMixin, Generic[T]):
    """Derives the full writer API from ``_write_items``.

    ``_write_items`` receives the batch in caller order and must either
    persist all of it or raise. Whether that exception reaches the caller
    depends on ``handle_inner_exceptions``.
    """

    model_type: Type[T]
    source_name: str
    handle_inner_exceptions: bool = False

    def get_source_name(self) -> str:
        return self.source_name

    def supported_types(self) -> Tuple[type, ...]:
        """Types accepted by ``write_data_as``."""
        return (self.model_type,)

    @abstractmethod
    def _write_items(self, items: List[Any]) -> None:
        """Persist a whole batch or raise; implemented by each adapter."""
        ...

    def write_data(self, item: T) -> bool:
        return self._write([item])

    def write_data_list(self, items: Iterable[T]) -> bool:
        return self._write(list(items))

    def write_data_as(self, item: Any) -> bool:
        return self._write(self._check_types([item]))

    def write_data_list_as(self, items: Iterable[Any]) -> bool:
        return self._write(self._check_types(items))

    async def write_data_async(
        self, item: T, cancellation: Optional[asyncio.Event] = None
    ) -> bool:
        return await self._run_async(
            functools.partial(self.write_data, item), cancellation
        )

    async def write_data_list_async(
        self,
        items: Iterable[T],
        cancellation: Optional[asyncio.Event] = None,
    ) -> bool:
        batch = list(items)
        return await self._run_async(
            functools.partial(self.write_data_list, batch), cancellation
        )

    async def write_data_as_async(
        self, item: Any, cancellation: Optional[asyncio.Event] = None
    ) -> bool:
        return await self._run_async(
            functools.partial(self.write_data_as, item), cancellation
        )

    async def write_data_list_as_async(
        self,
        items: Iterable[Any],
        cancellation: Optional[asyncio.Event] = None,
    ) -> bool:
        batch = list(items)
        return await self._run_async(
            functools.partial(self.write_data_list_as, batch), cancellation
        )

    def _check_types(self, items: Iterable[Any]) -> List[Any]:
        """Validate a whole batch before any of it is written."""
        supported = self.supported_types()
        batch = list(items)
        for item in batch:
            if not isinstance(item, supported):
                raise UnsupportedTypeError(type(item), supported)
        return batch

    def _write(self, items: List[Any]) -> bool:
        try:
            self._write_items(items)
        except UnsupportedTypeError:
            raise
        except Exception:
            if not self.handle_inner_exceptions:
                raise
            logger.exception(
                "Write failed, reporting failure to caller",
                extra={
                    "writer_type": type(self).__name__,
                    "source": self.get_source_name(),
                    "item_count": len(items),
                },
            )
            return False
        return True
