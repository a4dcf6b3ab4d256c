from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Event, GameConfig, State, TetrisGame


class Action(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    ROTATE = 3


ACTION_TO_EVENT = {
    Action.LEFT: Event.LEFT,
    Action.RIGHT: Event.RIGHT,
    Action.ROTATE: Event.ROTATE,
}


class FallingBlocksEnv(gym.Env):
    """Headless driver: every step applies one input and one gravity tick.

    The reward is the number of rows cleared during the step. Episodes are
    truncated by the `TimeLimit` wrapper `gym.make` adds from the registry.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 5}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None) -> None:
        super().__init__()
        self.game = TetrisGame(config)
        self.render_mode = render_mode

        rows, columns = self.game.level.dimensions
        self.observation_space = spaces.Box(low=0, high=1, shape=(rows, columns), dtype=np.int8)
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0
        self._rows_cleared = 0

    def _get_obs(self) -> np.ndarray:
        return self.game.render().cells.astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "state": self.game.state.value,
            "steps": self._steps,
            "rows_cleared": self._rows_cleared,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.catalog.seed(int(self.np_random.integers(2**31)))
        self.game.reset()
        self._steps = 0
        self._rows_cleared = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        event = ACTION_TO_EVENT.get(Action(int(action)))
        if event is not None:
            self.game.handle_event(event)
        cleared = self.game.tick()

        self._steps += 1
        self._rows_cleared += cleared
        terminated = self.game.state == State.END
        return self._get_obs(), float(cleared), terminated, False, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        # Flip so row 0 ends up at the bottom of the image.
        grid = np.flipud(self.game.render().cells)
        cell = 12
        h, w = grid.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                color = (70, 200, 120) if grid[y, x] else (30, 30, 36)
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
        return img
