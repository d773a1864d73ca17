"""
Spreadsheet implementation of DataWriter.

The existing workbook is opened and updated in place; only the cells of the
written rows change and the workbook is saved once per call. A record is
placed on the row given by its ``SheetRow.row_index`` or, when that is
None, on the row whose identifier cell matches, or else appended after the
last populated row of the region.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar, Union

from openpyxl import Workbook, load_workbook
from openpyxl.worksheet.worksheet import Worksheet

from dataio.errors import SourceNotFoundError
from dataio.repos.base import DataWriterMixin
from .base import ExcelIOBase
from .row import SheetRow

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ExcelWriterBase(ExcelIOBase[T], DataWriterMixin[T], ABC):
    """Upserts records into a worksheet region.

    Subclasses implement ``convert`` to turn a record into a ``SheetRow``.
    ``write_data_as`` also accepts ready-made ``SheetRow`` objects.
    """

    def __init__(
        self,
        data_path: Union[str, Path],
        worksheet_name: str,
        model_type: Type[T],
        start_row: int = 1,
        start_column: int = 1,
        end_column: int = 100,
        id_offset: int = 0,
        create_new_sheet: bool = False,
        create_new_file: bool = False,
        handle_inner_exceptions: bool = False,
        source_name: Optional[str] = None,
    ) -> None:
        """
        Args:
            id_offset: Offset from ``start_column`` of the column holding
                the record identifier, used to place unindexed rows

        See ExcelIOBase for the remaining arguments.
        """
        super().__init__(
            data_path,
            worksheet_name,
            model_type,
            start_row=start_row,
            start_column=start_column,
            end_column=end_column,
            create_new_sheet=create_new_sheet,
            create_new_file=create_new_file,
            handle_inner_exceptions=handle_inner_exceptions,
            source_name=source_name,
        )
        if not 0 <= id_offset < self.width:
            raise ValueError(
                f"id_offset must lie within the region, got {id_offset}"
            )
        self.id_offset = id_offset

    @abstractmethod
    def convert(self, item: T) -> SheetRow:
        """Build the row for one record.

        Leave ``row_index`` as None to let the writer place the row by
        identifier.
        """
        ...

    def supported_types(self) -> Tuple[type, ...]:
        return (self.model_type, SheetRow)

    def _write_items(self, items: List[Any]) -> None:
        rows = [
            item if isinstance(item, SheetRow) else self.convert(item)
            for item in items
        ]
        for row in rows:
            if len(row) > self.width:
                raise ValueError(
                    f"Row has {len(row)} values but the region is "
                    f"{self.width} columns wide"
                )

        workbook = self._open_workbook()
        try:
            worksheet = self._get_worksheet(
                workbook, create=self.create_new_sheet
            )
            row_ids, next_row = self._index_rows(worksheet)
            for row in rows:
                target = row.row_index
                key = self._row_key(row)
                if target is None:
                    target = row_ids.get(key) if key else None
                if target is None:
                    target = next_row
                next_row = max(next_row, target + 1)
                if key:
                    row_ids[key] = target

                for offset, value in enumerate(row.values):
                    # cell(value=None) would keep the previous content
                    cell = worksheet.cell(
                        row=target, column=self.start_column + offset
                    )
                    cell.value = None if value == "" else value
            workbook.save(self.data_path)
        finally:
            workbook.close()

        logger.info(
            "Saved rows to worksheet",
            extra={
                "data_path": str(self.data_path),
                "worksheet_name": self.worksheet_name,
                "written": len(rows),
            },
        )

    def _open_workbook(self) -> Workbook:
        if self.data_path.is_file():
            return load_workbook(self.data_path)
        if not self.create_new_file:
            raise SourceNotFoundError(
                f"Excel file not found at path: {self.data_path}",
                source=str(self.data_path),
            )

        logger.info(
            "Creating workbook", extra={"data_path": str(self.data_path)}
        )
        self.data_path.parent.mkdir(parents=True, exist_ok=True)
        workbook = Workbook()
        # The default sheet becomes the configured one
        workbook.active.title = self.worksheet_name
        return workbook

    def _index_rows(self, worksheet: Worksheet) -> Tuple[Dict[str, int], int]:
        """Map identifier text to row numbers and find the first free row."""
        row_ids: Dict[str, int] = {}
        last_populated = self.start_row - 1
        for row_number, cells in enumerate(
            worksheet.iter_rows(
                min_row=self.start_row,
                max_row=max(worksheet.max_row, self.start_row),
                min_col=self.start_column,
                max_col=self.end_column,
                values_only=True,
            ),
            start=self.start_row,
        ):
            texts = [self._cell_text(value) for value in cells]
            if not any(texts):
                continue
            last_populated = row_number
            key = texts[self.id_offset] if self.id_offset < len(texts) else ""
            if key and key not in row_ids:
                row_ids[key] = row_number
        return row_ids, last_populated + 1

    def _row_key(self, row: SheetRow) -> str:
        if self.id_offset < len(row.values):
            return self._cell_text(row.values[self.id_offset])
        return ""
