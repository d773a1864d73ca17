"""SQLAlchemy implementations of the reader and writer protocols."""

from .base import SqlIOBase
from .reader import SqlReader
from .writer import SqlWriter

__all__ = ["SqlIOBase", "SqlReader", "SqlWriter"]
