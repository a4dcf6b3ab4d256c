from __future__ import annotations

import random
from enum import IntEnum
from typing import Dict, List, Optional, Protocol, Sequence

import numpy as np

from .grid import Grid


class TetrominoType(IntEnum):
    O = 1
    I = 2
    J = 3
    L = 4
    S = 5
    Z = 6
    T = 7


# Written top row first; flipped on load because piece row 0 is the bottom.
BASE_SHAPES: Dict[TetrominoType, np.ndarray] = {
    TetrominoType.O: np.array([[1, 1], [1, 1]], dtype=np.bool_),
    TetrominoType.I: np.array([[1], [1], [1], [1]], dtype=np.bool_),
    TetrominoType.J: np.array([[1, 0, 0], [1, 1, 1]], dtype=np.bool_),
    TetrominoType.L: np.array([[0, 0, 1], [1, 1, 1]], dtype=np.bool_),
    TetrominoType.S: np.array([[0, 1, 1], [1, 1, 0]], dtype=np.bool_),
    TetrominoType.Z: np.array([[1, 1, 0], [0, 1, 1]], dtype=np.bool_),
    TetrominoType.T: np.array([[0, 1, 0], [1, 1, 1]], dtype=np.bool_),
}

FILLED_CHARS = "#o"
EMPTY_CHARS = "._"


def parse_shape(text: str) -> np.ndarray:
    """Parse a shape literal such as ``"#.. ###"`` into a bool array.

    Rows are separated by whitespace and written top row first. ``#`` or
    ``o`` marks a filled cell, ``.`` or ``_`` an empty one. The returned
    array is indexed bottom row first, like every piece grid.
    """
    rows = text.split()
    if not rows:
        raise ValueError("shape literal is empty")
    width = len(rows[0])
    if any(len(r) != width for r in rows):
        raise ValueError(f"shape literal is not rectangular: {text!r}")
    cells = np.zeros((len(rows), width), dtype=np.bool_)
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch in FILLED_CHARS:
                cells[y, x] = True
            elif ch not in EMPTY_CHARS:
                raise ValueError(f"unexpected character {ch!r} in shape literal")
    return np.flipud(cells)


class Piece:
    """A rigid shape on its own minimal bounding grid."""

    def __init__(self, cells: np.ndarray, kind: Optional[TetrominoType] = None) -> None:
        self._grid = Grid.from_array(cells)
        self.kind = kind

    @property
    def width(self) -> int:
        return self._grid.columns

    @property
    def height(self) -> int:
        return self._grid.rows

    @property
    def cells(self) -> np.ndarray:
        view = self._grid.cells.view()
        view.flags.writeable = False
        return view

    def count(self) -> int:
        return self._grid.count()

    def rotate(self) -> None:
        """Rotate clockwise by 90° in place.

        With original width W the rotated cell (r, c) is the original cell
        (c, W - r - 1); height and width swap.
        """
        self._grid = Grid.from_array(np.rot90(self._grid.cells))

    def rotated(self) -> "Piece":
        piece = self.copy()
        piece.rotate()
        return piece

    def copy(self) -> "Piece":
        return Piece(self._grid.cells, self.kind)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        name = self.kind.name if self.kind is not None else "custom"
        return f"Piece({name}, {self.height}x{self.width})"

    def __str__(self) -> str:
        return str(self._grid)


class IndexSource(Protocol):
    def randrange(self, stop: int) -> int:
        ...


class PieceCatalog:
    """The fixed set of shapes new pieces are drawn from.

    Every call to `create` picks uniformly and independently among the
    templates and hands out a fresh copy.
    """

    def __init__(
        self,
        rng: Optional[IndexSource] = None,
        seed: Optional[int] = None,
        shapes: Optional[Sequence[np.ndarray]] = None,
    ) -> None:
        self.rng: IndexSource = rng if rng is not None else random.Random(seed)
        if shapes is None:
            self._templates: List[Piece] = [
                Piece(np.flipud(cells), kind) for kind, cells in BASE_SHAPES.items()
            ]
        else:
            self._templates = [Piece(cells) for cells in shapes]
        if not self._templates:
            raise ValueError("piece catalog needs at least one shape")

    def __len__(self) -> int:
        return len(self._templates)

    @property
    def templates(self) -> List[Piece]:
        return [p.copy() for p in self._templates]

    def create(self) -> Piece:
        index = self.rng.randrange(len(self._templates))
        return self._templates[index].copy()

    def seed(self, seed: Optional[int]) -> None:
        self.rng = random.Random(seed)
