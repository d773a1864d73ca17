"""
Factory functions for building adapters from configuration.

Only file-based JSON sources can be built from configuration alone.
Relational sources need a live session and spreadsheet sources need a
converter subclass, so those are constructed directly.
"""

import logging
from typing import Any, Type, TypeVar

from .config import SourceConfig, SourceKind
from .repos.jsonfile import (
    JsonReader,
    JsonSplitReader,
    JsonSplitWriter,
    JsonWriter,
)
from .repositories import DataReader, DataWriter

logger = logging.getLogger(__name__)

T = TypeVar("T")

_READERS = {
    SourceKind.JSON: JsonReader,
    SourceKind.JSON_SPLIT: JsonSplitReader,
}
_WRITERS = {
    SourceKind.JSON: JsonWriter,
    SourceKind.JSON_SPLIT: JsonSplitWriter,
}


def reader_factory(
    source_config: SourceConfig, model_type: Type[T]
) -> DataReader[T]:
    """Create a reader for ``model_type`` records stored in a configured
    source.

    Raises:
        ValueError: If the source kind cannot be built from configuration
    """
    reader_class = _lookup(_READERS, source_config)
    reader = reader_class(
        source_config.data_path,
        model_type,
        serializer=source_config.serializer,
        create_new_file=source_config.create_new_file,
    )
    logger.info(
        "Created reader from configuration",
        extra={
            "kind": source_config.kind.value,
            "data_path": source_config.data_path,
            "reader_type": reader_class.__name__,
        },
    )
    return reader


def writer_factory(
    source_config: SourceConfig, model_type: Type[T]
) -> DataWriter[T]:
    """Create a writer for ``model_type`` records stored in a configured
    source.

    Raises:
        ValueError: If the source kind cannot be built from configuration
    """
    writer_class = _lookup(_WRITERS, source_config)
    writer = writer_class(
        source_config.data_path,
        model_type,
        serializer=source_config.serializer,
        create_new_file=source_config.create_new_file,
        handle_inner_exceptions=source_config.handle_inner_exceptions,
    )
    logger.info(
        "Created writer from configuration",
        extra={
            "kind": source_config.kind.value,
            "data_path": source_config.data_path,
            "writer_type": writer_class.__name__,
        },
    )
    return writer


def _lookup(registry: dict, source_config: SourceConfig) -> Any:
    try:
        return registry[source_config.kind]
    except KeyError:
        raise ValueError(
            f"Unsupported source kind for configuration-built adapters: "
            f"{source_config.kind.value}"
        ) from None
