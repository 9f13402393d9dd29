"""
In-memory table model shared by the loader, the validators and the reporters.

A Table is a rectangular grid of string cells with named columns. Every row
always holds exactly one cell per column.
"""

from dataclasses import dataclass, field


@dataclass
class Table:
    """
    Rectangular grid of string cells.

    Attributes:
        columns: Unique column names, in file order
        rows: Data rows (header excluded), each aligned 1:1 with columns
    """
    columns: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def add_row(self, values: list[str]) -> list[str]:
        """
        Append a row, padding short input with empty strings and
        dropping values beyond the column count.

        Returns:
            The row as stored
        """
        width = len(self.columns)
        row = [values[i] if i < len(values) else '' for i in range(width)]
        self.rows.append(row)
        return row

    def column_index(self, name: str) -> int:
        """Position of a column (exact name match)."""
        try:
            return self.columns.index(name)
        except ValueError:
            raise KeyError(f"Unknown column: {name}") from None

    def cell(self, row_index: int, column: str | int) -> str:
        """Read a cell by 0-based row position and column name or position."""
        col = column if isinstance(column, int) else self.column_index(column)
        return self.rows[row_index][col]

    def set_cell(self, row_index: int, column: str | int, value: str) -> None:
        """Overwrite a cell by 0-based row position and column name or position."""
        col = column if isinstance(column, int) else self.column_index(column)
        self.rows[row_index][col] = value

    def copy(self) -> "Table":
        """Return an independent copy (rows are copied, not shared)."""
        return Table(columns=list(self.columns), rows=[list(r) for r in self.rows])
