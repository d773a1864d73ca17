"""
dataio: one read/write interface over relational, spreadsheet and JSON
storage.

Import adapters from their backend packages, e.g.:
    from dataio.repos.jsonfile import JsonReader, JsonWriter
    from dataio.repos.sql import SqlReader, SqlWriter
    from dataio.repos.excel import ExcelReaderBase, ExcelWriterBase
"""

from .config import (
    DataIOConfig,
    JsonSerializerSettings,
    SourceConfig,
    SourceKind,
    configure,
    load_config,
)
from .domain import IdentityModel
from .errors import (
    DataIOError,
    SerializationError,
    SourceNotFoundError,
    UnsupportedTypeError,
    WriteError,
)
from .events import ModelEventHub
from .repositories import DataReader, DataWriter

__all__ = [
    "DataIOConfig",
    "DataIOError",
    "DataReader",
    "DataWriter",
    "IdentityModel",
    "JsonSerializerSettings",
    "ModelEventHub",
    "SerializationError",
    "SourceConfig",
    "SourceKind",
    "SourceNotFoundError",
    "UnsupportedTypeError",
    "WriteError",
    "configure",
    "load_config",
]
