"""Gymnasium environment for Falling Blocks."""

from __future__ import annotations

from gymnasium.envs.registration import register

from .tetris_env import Action, FallingBlocksEnv

# Default level from the interactive game: 22 rows by 16 columns
register(
    id="FallingBlocks-22x16-v0",
    entry_point="falling_blocks.env.tetris_env:FallingBlocksEnv",
    max_episode_steps=2000,
)

__all__ = ["Action", "FallingBlocksEnv"]
