"""
Spreadsheet implementation of DataReader.

Rows are scanned from ``start_row`` down to the last populated row of the
worksheet. Empty rows are skipped; a run of more than
``empty_rows_break_hit`` consecutive empty rows is treated as the end of the
data, so unused trailing capacity of a sheet is not scanned.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Optional, Tuple, Type, TypeVar, Union

from openpyxl import load_workbook

from dataio.errors import SourceNotFoundError, UnsupportedTypeError
from dataio.repos.base import DataReaderMixin
from .base import ExcelIOBase
from .row import SheetRow

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ExcelReaderBase(ExcelIOBase[T], DataReaderMixin[T], ABC):
    """Reads records from a worksheet region.

    Subclasses implement ``convert`` to turn a ``SheetRow`` into a record.
    Besides the record type, ``read_data_as`` accepts ``str`` (each row
    joined with ``data_separator``) and ``SheetRow`` (raw rows).
    """

    def __init__(
        self,
        data_path: Union[str, Path],
        worksheet_name: str,
        model_type: Type[T],
        start_row: int = 1,
        start_column: int = 1,
        end_column: int = 100,
        empty_rows_break_hit: int = 3,
        source_name: Optional[str] = None,
    ) -> None:
        super().__init__(
            data_path,
            worksheet_name,
            model_type,
            start_row=start_row,
            start_column=start_column,
            end_column=end_column,
            source_name=source_name,
        )
        if empty_rows_break_hit <= 0:
            raise ValueError(
                "empty_rows_break_hit must be positive, "
                f"got {empty_rows_break_hit}"
            )
        self.empty_rows_break_hit = empty_rows_break_hit

    @abstractmethod
    def convert(self, row: SheetRow) -> T:
        """Build a record from one non-empty row."""
        ...

    def supported_types(self) -> Tuple[type, ...]:
        return (self.model_type, str, SheetRow)

    def read_rows(self) -> List[SheetRow]:
        """Return the non-empty rows of the region.

        Raises:
            SourceNotFoundError: If the workbook or worksheet is missing
        """
        if not self.data_path.is_file():
            raise SourceNotFoundError(
                f"Excel file not found at path: {self.data_path}",
                source=str(self.data_path),
            )

        workbook = load_workbook(self.data_path, read_only=True, data_only=True)
        try:
            worksheet = self._get_worksheet(workbook)
            rows: List[SheetRow] = []
            empty_run = 0
            scanned = self.start_row
            for scanned, cells in enumerate(
                worksheet.iter_rows(
                    min_row=self.start_row,
                    min_col=self.start_column,
                    max_col=self.end_column,
                    values_only=True,
                ),
                start=self.start_row,
            ):
                row = SheetRow(scanned, self.start_column, self.end_column)
                for value in cells:
                    row.append(self._cell_text(value))
                # Short rows come back from read-only sheets unpadded
                while len(row) < self.width:
                    row.append("")

                if row.is_empty():
                    empty_run += 1
                else:
                    empty_run = 0
                    rows.append(row)
                if empty_run > self.empty_rows_break_hit:
                    break
        finally:
            workbook.close()

        logger.debug(
            f"Read {len(rows)} rows from worksheet",
            extra={
                "data_path": str(self.data_path),
                "worksheet_name": self.worksheet_name,
                "last_scanned_row": scanned,
            },
        )
        return rows

    def read_data(self) -> List[T]:
        return [self.convert(row) for row in self.read_rows()]

    def read_data_as(self, data_type: Type[Any]) -> List[Any]:
        if data_type is str:
            return [row.join(self.data_separator) for row in self.read_rows()]
        if data_type is SheetRow:
            return self.read_rows()
        if isinstance(data_type, type) and issubclass(
            self.model_type, data_type
        ):
            return self.read_data()
        raise UnsupportedTypeError(data_type, self.supported_types())

    def read_as_text(self) -> str:
        """Return the whole region as text, one line per non-empty row."""
        return self.row_separator.join(self.read_data_as(str))
