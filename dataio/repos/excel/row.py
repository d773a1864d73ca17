"""
Row abstraction for spreadsheet sources.

A ``SheetRow`` is a bounded slice of one worksheet row: the cell values of
columns ``start_column`` onwards, kept as text. Indexing uses absolute
(1-based) worksheet column numbers, so ``row[start_column]`` is the first
value of the slice.
"""

from typing import Any, Iterator, List, Optional


class SheetRow:
    """Cell values of one logical record in a worksheet region."""

    def __init__(
        self,
        row_index: Optional[int],
        start_column: int,
        end_column: int,
        values: Optional[List[str]] = None,
    ) -> None:
        """
        Args:
            row_index: 1-based worksheet row, or None when a writer should
                place the record itself
            start_column: 1-based first column of the region
            end_column: 1-based last column of the region (inclusive)
            values: Initial cell values, first one at ``start_column``
        """
        self.row_index = row_index
        self.start_column = start_column
        self.end_column = end_column
        self.values: List[str] = list(values) if values is not None else []

    def __getitem__(self, column: int) -> str:
        offset = column - self.start_column
        if 0 <= offset < len(self.values):
            return self.values[offset]
        raise IndexError(
            f"Column {column} is outside of row range "
            f"[{self.start_column}, {self.start_column + len(self.values)})"
        )

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SheetRow):
            return NotImplemented
        return (
            self.row_index == other.row_index
            and self.start_column == other.start_column
            and self.values == other.values
        )

    def __repr__(self) -> str:
        return (
            f"SheetRow(row_index={self.row_index!r}, "
            f"start_column={self.start_column!r}, values={self.values!r})"
        )

    def append(self, value: Optional[str]) -> None:
        self.values.append("" if value is None else value)

    def is_empty(self) -> bool:
        """True when every cell value is empty."""
        return all(not value for value in self.values)

    def join(self, sep: str = ";") -> str:
        return sep.join(self.values)
