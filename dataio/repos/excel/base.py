"""
Common configuration for the spreadsheet adapters.

A spreadsheet source is a rectangular region of one named worksheet in an
.xlsx workbook, starting at (``start_row``, ``start_column``) and spanning
columns up to ``end_column``. Workbooks are accessed through openpyxl.
"""

import logging
from pathlib import Path
from typing import Any, Generic, Optional, Type, TypeVar, Union

from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from dataio.errors import SourceNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ExcelIOBase(Generic[T]):
    """Holds the workbook path, worksheet and region bounds of a source.

    ``source_name``, ``data_separator`` and ``row_separator`` are
    process-wide defaults shared by every spreadsheet adapter.
    """

    source_name: str = "Excel File"
    data_separator: str = ";"
    row_separator: str = "\n"

    def __init__(
        self,
        data_path: Union[str, Path],
        worksheet_name: str,
        model_type: Type[T],
        start_row: int = 1,
        start_column: int = 1,
        end_column: int = 100,
        create_new_sheet: bool = False,
        create_new_file: bool = False,
        handle_inner_exceptions: bool = False,
        source_name: Optional[str] = None,
    ) -> None:
        """
        Args:
            data_path: Path to the .xlsx workbook
            worksheet_name: Name of the worksheet holding the records
            model_type: Record type converted to and from rows
            start_row: 1-based first row of the region
            start_column: 1-based first column of the region
            end_column: 1-based last column of the region (inclusive)
            create_new_sheet: Writers create a missing worksheet
            create_new_file: Writers create a missing workbook
            handle_inner_exceptions: Report write failures as ``False``
                instead of raising
            source_name: Label overriding the process-wide source name

        Raises:
            ValueError: If a path or name is empty or a bound is not
                positive
        """
        if data_path is None or not str(data_path).strip():
            raise ValueError("data_path cannot be null or empty")
        if not worksheet_name:
            raise ValueError("worksheet_name cannot be null or empty")
        for name, value in (
            ("start_row", start_row),
            ("start_column", start_column),
            ("end_column", end_column),
        ):
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if end_column < start_column:
            raise ValueError(
                f"end_column ({end_column}) is before start_column "
                f"({start_column})"
            )

        self.data_path = Path(data_path)
        self.worksheet_name = worksheet_name
        self.model_type = model_type
        self.start_row = start_row
        self.start_column = start_column
        self.end_column = end_column
        self.create_new_sheet = create_new_sheet
        self.create_new_file = create_new_file
        self.handle_inner_exceptions = handle_inner_exceptions
        if source_name is not None:
            self.source_name = source_name

        logger.debug(
            f"Initialized {type(self).__name__}",
            extra={
                "data_path": str(self.data_path),
                "worksheet_name": worksheet_name,
                "start_row": start_row,
                "start_column": start_column,
                "end_column": end_column,
            },
        )

    @property
    def width(self) -> int:
        """Number of columns in the region."""
        return self.end_column - self.start_column + 1

    def _get_worksheet(
        self, workbook: Workbook, create: bool = False
    ) -> Worksheet:
        """Return the configured worksheet.

        Raises:
            SourceNotFoundError: If the worksheet is missing and ``create``
                is False; the error lists the available worksheets
        """
        if self.worksheet_name in workbook.sheetnames:
            return workbook[self.worksheet_name]
        if create:
            logger.info(
                "Creating worksheet",
                extra={
                    "data_path": str(self.data_path),
                    "worksheet_name": self.worksheet_name,
                },
            )
            return workbook.create_sheet(self.worksheet_name)
        raise SourceNotFoundError(
            f"Worksheet '{self.worksheet_name}' not found in {self.data_path}",
            source=str(self.data_path),
            available=workbook.sheetnames,
        )

    @staticmethod
    def _cell_text(value: Any) -> str:
        return "" if value is None else str(value)
