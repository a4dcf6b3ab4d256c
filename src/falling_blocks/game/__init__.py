"""Game module for Falling Blocks.

Exports the rules engine and supporting classes:
- Grid: fixed-size boolean matrix with row elimination
- Piece: rigid shape with clockwise rotation
- PieceCatalog: the seven tetrominoes and random selection
- TetrisGame: level, falling piece and the event/tick state machine
"""

from .grid import Grid, format_grid
from .pieces import Piece, PieceCatalog, TetrominoType, parse_shape
from .core import Event, GameConfig, PlacedPiece, State, TetrisGame

__all__ = [
    "Grid",
    "format_grid",
    "Piece",
    "PieceCatalog",
    "TetrominoType",
    "parse_shape",
    "Event",
    "GameConfig",
    "PlacedPiece",
    "State",
    "TetrisGame",
]
