"""
Change and save notifications for identity-keyed records.

Records do not carry notification logic themselves. The component that owns
a set of records creates a ``ModelEventHub``, registers callbacks, and
notifies through the hub when a record changes or should be persisted.
"""

import logging
from typing import Any, Callable, List

from .domain import IdentityModel

logger = logging.getLogger(__name__)

ModelCallback = Callable[[IdentityModel[Any]], Any]


class ModelEventHub:
    """Registry of data-changed and save-requested callbacks.

    Callbacks run synchronously, in registration order, on the notifying
    thread. Exceptions raised by a callback propagate to the notifier and
    stop the remaining callbacks.
    """

    def __init__(self) -> None:
        self._data_changed: List[ModelCallback] = []
        self._save_requested: List[ModelCallback] = []

    def on_data_changed(self, callback: ModelCallback) -> Callable[[], None]:
        """Register a data-changed callback; returns an unsubscribe hook."""
        return self._subscribe(self._data_changed, callback)

    def on_save_requested(
        self, callback: ModelCallback
    ) -> Callable[[], None]:
        """Register a save-requested callback; returns an unsubscribe hook."""
        return self._subscribe(self._save_requested, callback)

    def data_changed(self, entity: IdentityModel[Any]) -> None:
        self._notify(self._data_changed, entity, "data_changed")

    def request_save(self, entity: IdentityModel[Any]) -> None:
        self._notify(self._save_requested, entity, "save_requested")

    def bind_writer(self, writer: Any) -> Callable[[], None]:
        """Persist records through ``writer.write_data`` on save requests.

        Args:
            writer: Any DataWriter implementation bound to the record type

        Returns:
            Hook that detaches the writer again
        """
        logger.debug(
            "Binding writer to save requests",
            extra={"writer_type": type(writer).__name__},
        )
        return self.on_save_requested(writer.write_data)

    @staticmethod
    def _subscribe(
        callbacks: List[ModelCallback], callback: ModelCallback
    ) -> Callable[[], None]:
        callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in callbacks:
                callbacks.remove(callback)

        return unsubscribe

    @staticmethod
    def _notify(
        callbacks: List[ModelCallback],
        entity: IdentityModel[Any],
        event_name: str,
    ) -> None:
        logger.debug(
            f"Dispatching {event_name}",
            extra={
                "entity_id": str(entity.get_id()),
                "subscribers": len(callbacks),
            },
        )
        # Copy so callbacks may unsubscribe while being notified
        for callback in list(callbacks):
            callback(entity)
