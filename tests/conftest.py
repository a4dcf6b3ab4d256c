from __future__ import annotations

from typing import Iterable, Optional, Sequence

from falling_blocks.game import GameConfig, PieceCatalog, TetrisGame, parse_shape


class ScriptedRandom:
    """Deterministic stand-in for `random.Random`, cycling through picks."""

    def __init__(self, picks: Iterable[int]) -> None:
        self.picks = list(picks)
        self.calls = 0

    def randrange(self, stop: int) -> int:
        pick = self.picks[self.calls % len(self.picks)]
        self.calls += 1
        return pick % stop


def make_game(rows: int, columns: int, shapes: Optional[Sequence[str]] = None, picks: Sequence[int] = (0,)) -> TetrisGame:
    cells = [parse_shape(s) for s in shapes] if shapes is not None else None
    catalog = PieceCatalog(rng=ScriptedRandom(picks), shapes=cells)
    return TetrisGame(GameConfig(rows=rows, columns=columns), catalog=catalog)
