from __future__ import annotations

from typing import List, Tuple

import numpy as np


Dimensions = Tuple[int, int]


class Grid:
    """Fixed-size 2D boolean matrix indexed as (row, col).

    Row 0 is the bottom row of a level; rows increase upward. Dimensions
    are fixed at construction and never change afterwards.
    """

    def __init__(self, rows: int, columns: int) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError(f"grid dimensions must be positive, got {rows}x{columns}")
        self.rows = int(rows)
        self.columns = int(columns)
        self.cells = np.zeros((self.rows, self.columns), dtype=np.bool_)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Grid":
        data = np.asarray(array, dtype=np.bool_)
        if data.ndim != 2:
            raise ValueError(f"expected a 2D array, got shape {data.shape}")
        grid = cls(*data.shape)
        grid.cells[:, :] = data
        return grid

    @property
    def dimensions(self) -> Dimensions:
        return self.rows, self.columns

    def _check(self, row: int, col: int) -> None:
        # numpy would silently wrap negative indices
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            raise IndexError(f"cell ({row}, {col}) outside {self.rows}x{self.columns} grid")

    def get(self, row: int, col: int) -> bool:
        self._check(row, col)
        return bool(self.cells[row, col])

    def set(self, row: int, col: int, value: bool = True) -> None:
        self._check(row, col)
        self.cells[row, col] = bool(value)

    def clear(self) -> None:
        self.cells.fill(False)

    def count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def copy(self) -> "Grid":
        return Grid.from_array(self.cells)

    def full_rows(self) -> List[int]:
        return [int(r) for r in np.flatnonzero(np.all(self.cells, axis=1))]

    def eliminate_rows(self) -> int:
        """Remove full rows and compact the rest toward row 0.

        Rows above a removed row shift down by one per removed row below
        them; vacated rows at the top are left empty. Returns the number of
        rows removed.
        """
        full = self.full_rows()
        if not full:
            return 0
        kept = np.delete(self.cells, full, axis=0)
        rebuilt = np.zeros_like(self.cells)
        rebuilt[: kept.shape[0]] = kept
        self.cells = rebuilt
        return len(full)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.dimensions == other.dimensions and bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, columns={self.columns}, filled={self.count()})"

    def __str__(self) -> str:
        return format_grid(self)


def format_grid(grid: Grid, filled: str = "█", empty: str = "·") -> str:
    """Text picture of a grid, top row first."""
    lines = []
    for row in reversed(range(grid.rows)):
        lines.append("".join(filled if cell else empty for cell in grid.cells[row]))
    return "\n".join(lines)
