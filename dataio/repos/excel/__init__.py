"""Spreadsheet (.xlsx) implementations of the reader and writer
protocols."""

from .base import ExcelIOBase
from .reader import ExcelReaderBase
from .row import SheetRow
from .writer import ExcelWriterBase

__all__ = ["ExcelIOBase", "ExcelReaderBase", "ExcelWriterBase", "SheetRow"]
