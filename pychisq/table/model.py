"""
NumericTable and CursorPosition: the data model behind the grid editor.

A NumericTable is text, not numbers. The editor appends and erases
characters; conversion to numbers happens once, in parse_cells(), when
the user finishes editing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

import numpy as np
from numpy.typing import NDArray

from pychisq.core.exceptions import DimensionError, TableParseError
from pychisq.core.validation import parse_float, parse_count


@dataclass(frozen=True)
class CursorPosition:
    """
    Editor cursor.

    row == 0 addresses a column label, col == 0 a row label, (0, 0) the
    corner label; anything else addresses cells[row-1][col-1].
    """
    row: int
    col: int

    @property
    def is_corner(self) -> bool:
        return self.row == 0 and self.col == 0

    @property
    def is_cell(self) -> bool:
        return self.row > 0 and self.col > 0

    def shifted(self, d_row: int, d_col: int, rows: int, cols: int) -> CursorPosition:
        """Move by (d_row, d_col), clamped to [0, rows] x [0, cols]."""
        return CursorPosition(
            row=min(max(self.row + d_row, 0), rows),
            col=min(max(self.col + d_col, 0), cols),
        )


@dataclass
class NumericTable:
    """
    Editable grid of text cells with labeled rows and columns.

    Attributes:
        cells: rows x cols text grid (rectangular)
        row_labels: rows + 1 labels; index 0 is the corner label
        column_labels: cols labels
    """
    cells: list[list[str]]
    row_labels: list[str]
    column_labels: list[str]

    def __post_init__(self) -> None:
        if not self.cells or not self.cells[0]:
            raise DimensionError(
                f"table must have at least one row and one column, "
                f"got {len(self.cells)} rows"
            )
        width = len(self.cells[0])
        ragged = [i for i, row in enumerate(self.cells) if len(row) != width]
        if ragged:
            raise DimensionError(
                f"all rows must have {width} cells, rows {ragged} differ"
            )
        if len(self.row_labels) != len(self.cells) + 1:
            raise DimensionError(
                f"row_labels: expected {len(self.cells) + 1} labels "
                f"(corner + one per row), got {len(self.row_labels)}"
            )
        if len(self.column_labels) != width:
            raise DimensionError(
                f"column_labels: expected {width} labels, got {len(self.column_labels)}"
            )

    @classmethod
    def blank(
        cls,
        rows: int,
        cols: int,
        *,
        row_labels: Sequence[str] | None = None,
        column_labels: Sequence[str] | None = None,
        row_label: str = "---",
        column_label: str = "---",
    ) -> NumericTable:
        """
        Create a rows x cols table of empty cells.

        Args:
            rows, cols: Grid dimensions (both >= 1)
            row_labels: Explicit labels (corner first); defaults to row_label
                repeated rows + 1 times
            column_labels: Explicit labels; defaults to column_label repeated
            row_label, column_label: Fill values for the defaults
        """
        if rows < 1 or cols < 1:
            raise DimensionError(f"table needs rows >= 1 and cols >= 1, got {rows}x{cols}")
        return cls(
            cells=[["" for _ in range(cols)] for _ in range(rows)],
            row_labels=list(row_labels) if row_labels is not None else [row_label] * (rows + 1),
            column_labels=(
                list(column_labels) if column_labels is not None else [column_label] * cols
            ),
        )

    @classmethod
    def from_values(
        cls,
        values: Sequence[Sequence[object]],
        row_labels: Sequence[str],
        column_labels: Sequence[str],
        fmt: Callable[[object], str] = str,
    ) -> NumericTable:
        """Build a display table by formatting each value with fmt."""
        return cls(
            cells=[[fmt(v) for v in row] for row in values],
            row_labels=list(row_labels),
            column_labels=list(column_labels),
        )

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0])

    def text_at(self, pos: CursorPosition) -> str:
        """Text addressed by the cursor."""
        if pos.col == 0:
            return self.row_labels[pos.row]
        if pos.row == 0:
            return self.column_labels[pos.col - 1]
        return self.cells[pos.row - 1][pos.col - 1]

    def set_text_at(self, pos: CursorPosition, text: str) -> None:
        """Replace the text addressed by the cursor."""
        if pos.col == 0:
            self.row_labels[pos.row] = text
        elif pos.row == 0:
            self.column_labels[pos.col - 1] = text
        else:
            self.cells[pos.row - 1][pos.col - 1] = text

    def parse_cells(self, parser: Callable[[str], float | int | None] = parse_float) -> NDArray:
        """
        Convert every cell with parser.

        Returns:
            rows x cols float64 array

        Raises:
            TableParseError: listing every cell that failed to parse
        """
        values = np.zeros((self.rows, self.cols), dtype=np.float64)
        failed = []
        for i, row in enumerate(self.cells):
            for j, text in enumerate(row):
                value = parser(text)
                if value is None:
                    failed.append((i + 1, j + 1))
                else:
                    values[i, j] = value
        if failed:
            raise TableParseError(
                f"{len(failed)} cell(s) are not valid numbers: {failed}",
                positions=failed,
            )
        return values

    def parse_column_labels(
        self, parser: Callable[[str], int | None] = parse_count,
    ) -> list[int]:
        """
        Convert every column label with parser (category indices).

        Raises:
            TableParseError: listing every label that failed to parse
        """
        parsed = [parser(label) for label in self.column_labels]
        failed = [(0, j + 1) for j, v in enumerate(parsed) if v is None]
        if failed:
            raise TableParseError(
                f"{len(failed)} column label(s) are not valid categories: {failed}",
                positions=failed,
            )
        return parsed
