"""JSON file implementations of the reader and writer protocols."""

from .base import JsonIOBase
from .reader import JsonReader
from .split_reader import JsonSplitReader
from .split_writer import JsonSplitWriter
from .writer import JsonWriter

__all__ = [
    "JsonIOBase",
    "JsonReader",
    "JsonSplitReader",
    "JsonSplitWriter",
    "JsonWriter",
]
