from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

from .grid import Grid
from .pieces import Piece, PieceCatalog


logger = logging.getLogger(__name__)

Position = Tuple[int, int]

DOWN: Position = (-1, 0)
LEFT: Position = (0, -1)
RIGHT: Position = (0, 1)


class Event(IntEnum):
    START = 0
    LEFT = 1
    RIGHT = 2
    ROTATE = 3
    PAUSE = 4
    QUIT = 5


class State(Enum):
    INIT = "init"
    PLAYING = "playing"
    PAUSED = "paused"
    END = "end"


@dataclass
class GameConfig:
    rows: int = 22
    columns: int = 16
    random_seed: Optional[int] = None


@dataclass
class PlacedPiece:
    """A piece and the level offset of its bottom-left cell."""

    piece: Piece
    row: int
    col: int

    @property
    def position(self) -> Position:
        return self.row, self.col

    def moved(self, d_row: int, d_col: int) -> "PlacedPiece":
        return PlacedPiece(self.piece, self.row + d_row, self.col + d_col)

    def rotated(self) -> "PlacedPiece":
        return PlacedPiece(self.piece.rotated(), self.row, self.col)


class TetrisGame:
    """Level grid, falling piece and the event/tick state machine."""

    def __init__(self, config: Optional[GameConfig] = None, catalog: Optional[PieceCatalog] = None) -> None:
        self.config = config or GameConfig()
        self.level = Grid(self.config.rows, self.config.columns)
        self.catalog = catalog or PieceCatalog(seed=self.config.random_seed)
        self.current: Optional[PlacedPiece] = None
        self.state = State.INIT

    def handle_event(self, event: Event) -> bool:
        """Apply an input event. Returns False only for `Event.QUIT`."""
        if event == Event.QUIT:
            return False

        if event == Event.START:
            if self.state in (State.INIT, State.END):
                self.reset()
            elif self.state == State.PAUSED:
                self._set_state(State.PLAYING)
            return True

        if event == Event.PAUSE:
            if self.state == State.PLAYING:
                self._set_state(State.PAUSED)
            return True

        if self.state != State.PLAYING:
            return True

        if event == Event.LEFT:
            self.move_shape(LEFT)
        elif event == Event.RIGHT:
            self.move_shape(RIGHT)
        elif event == Event.ROTATE:
            self.rotate()
        return True

    def tick(self) -> int:
        """Advance gravity by one row. Returns the number of rows cleared."""
        if self.state != State.PLAYING:
            return 0

        if self.move_shape(DOWN):
            return 0

        self._lock()
        cleared = self.level.eliminate_rows()
        if cleared:
            logger.debug("Cleared %d row(s)", cleared)
        self._spawn()
        self._end_if_blocked()
        return cleared

    def render(self) -> Grid:
        """Level snapshot with the falling piece overlaid, clipped to the level."""
        placed = self._require_current()
        snapshot = self.level.copy()
        cells = placed.piece.cells
        for h in range(placed.piece.height):
            row = placed.row + h
            if not 0 <= row < self.level.rows:
                continue
            for w in range(placed.piece.width):
                col = placed.col + w
                if cells[h, w] and 0 <= col < self.level.columns:
                    snapshot.cells[row, col] = True
        return snapshot

    def reset(self) -> None:
        self.level.clear()
        self._spawn()
        self._set_state(State.PLAYING)

    def move_shape(self, direction: Position) -> bool:
        """Shift the falling piece by (d_row, d_col) if the target is free."""
        if self.state != State.PLAYING:
            return False
        placed = self._require_current()
        candidate = placed.moved(*direction)
        if self.out_of_bounds(candidate) or self.collides(candidate):
            return False
        self.current = candidate
        return True

    def rotate(self) -> bool:
        if self.state != State.PLAYING:
            return False
        candidate = self._require_current().rotated()
        if self.out_of_bounds(candidate) or self.collides(candidate):
            return False
        self.current = candidate
        return True

    def out_of_bounds(self, placed: Optional[PlacedPiece] = None) -> bool:
        if placed is None:
            placed = self._require_current()
        return (
            placed.row < 0
            or placed.row + placed.piece.height > self.level.rows
            or placed.col < 0
            or placed.col + placed.piece.width > self.level.columns
        )

    def collides(self, placed: Optional[PlacedPiece] = None) -> bool:
        """True if an occupied piece cell lands on an occupied level cell.

        Piece cells outside the level never collide; bounds are checked
        separately by `out_of_bounds`.
        """
        if placed is None:
            placed = self._require_current()
        cells = placed.piece.cells
        for h in range(placed.piece.height):
            row = placed.row + h
            if not 0 <= row < self.level.rows:
                continue
            for w in range(placed.piece.width):
                col = placed.col + w
                if 0 <= col < self.level.columns and cells[h, w] and self.level.cells[row, col]:
                    return True
        return False

    def _require_current(self) -> PlacedPiece:
        if self.current is None:
            raise RuntimeError("no falling piece; send Event.START before querying the game")
        return self.current

    def _set_state(self, state: State) -> None:
        if state != self.state:
            logger.debug("State %s -> %s", self.state.name, state.name)
        self.state = state

    def _spawn(self) -> None:
        piece = self.catalog.create()
        placed = PlacedPiece(piece, self.level.rows - piece.height, self.level.columns // 2)
        # Rows grow upward, so this pushes the piece toward and past the top.
        while self.collides(placed):
            placed.row += 1
        self.current = placed

    def _end_if_blocked(self) -> None:
        if self.out_of_bounds() or self.collides():
            self._set_state(State.END)
            logger.info("Game over: no room to spawn a new piece")

    def _lock(self) -> None:
        placed = self._require_current()
        cells = placed.piece.cells
        for h in range(placed.piece.height):
            for w in range(placed.piece.width):
                row, col = placed.row + h, placed.col + w
                # A spawn wider than a narrow level can lock partly outside it.
                if cells[h, w] and 0 <= row < self.level.rows and 0 <= col < self.level.columns:
                    self.level.set(row, col, True)
        self.current = None
