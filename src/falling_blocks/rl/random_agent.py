from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import gymnasium as gym

import falling_blocks.env  # noqa: F401  ensure registration


logger = logging.getLogger(__name__)


def run_random(episodes: int = 5, steps: int = 2000, seed: Optional[int] = None) -> List[float]:
    env = gym.make("FallingBlocks-22x16-v0", max_episode_steps=steps)
    env.action_space.seed(seed)
    totals: List[float] = []
    try:
        obs, info = env.reset(seed=seed)
        for episode in range(episodes):
            total_reward = 0.0
            while True:
                obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
                total_reward += float(reward)
                if terminated or truncated:
                    break
            logger.info("Episode %d: %d steps, %.0f rows cleared", episode, info["steps"], total_reward)
            totals.append(total_reward)
            obs, info = env.reset()
    finally:
        env.close()
    return totals


def main(argv: Optional[List[str]] = None) -> None:
    p = argparse.ArgumentParser(description="Run a random agent on Falling Blocks")
    p.add_argument("--episodes", type=int, default=5)
    p.add_argument("--steps", type=int, default=2000)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log-level", default="INFO")
    args = p.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s - %(levelname)s - %(message)s")
    totals = run_random(args.episodes, args.steps, args.seed)
    print(f"Random agent rows cleared per episode: {totals}")


if __name__ == "__main__":  # pragma: no cover
    main()
