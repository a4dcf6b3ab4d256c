from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import pygame

from falling_blocks.game import Event, GameConfig, State, TetrisGame
from .renderer import Renderer


logger = logging.getLogger(__name__)


@dataclass
class PlayConfig:
    tick_ms: int = 200
    fast_drop_ticks: int = 5
    cell_size: int = 28
    margin: int = 20
    fps: int = 60


KEY_TO_EVENT: Dict[int, Event] = {
    pygame.K_LEFT: Event.LEFT,
    pygame.K_RIGHT: Event.RIGHT,
    pygame.K_UP: Event.ROTATE,
    pygame.K_RETURN: Event.START,
    pygame.K_r: Event.START,
    pygame.K_q: Event.QUIT,
    pygame.K_ESCAPE: Event.QUIT,
}


def pause_toggle_event(state: State) -> Event:
    return Event.START if state == State.PAUSED else Event.PAUSE


def handle_key(game: TetrisGame, key: int, play: PlayConfig) -> bool:
    """Translate one key press into engine calls. Returns False to quit."""
    if key == pygame.K_DOWN:
        for _ in range(play.fast_drop_ticks):
            game.tick()
        return True
    if key == pygame.K_p:
        return game.handle_event(pause_toggle_event(game.state))
    event = KEY_TO_EVENT.get(key)
    if event is None:
        return True
    return game.handle_event(event)


def run(config: Optional[GameConfig] = None, play: Optional[PlayConfig] = None) -> None:
    play = play or PlayConfig()
    game = TetrisGame(config)
    game.handle_event(Event.START)

    pygame.init()
    try:
        clock = pygame.time.Clock()
        renderer = Renderer(cell_size=play.cell_size, margin=play.margin)
        screen = pygame.display.set_mode(renderer.screen_size(game.level.rows, game.level.columns))
        pygame.display.set_caption("Falling Blocks")
        logger.info("Started %dx%d level, tick %d ms", game.level.rows, game.level.columns, play.tick_ms)

        last_tick = pygame.time.get_ticks()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = handle_key(game, event.key, play) and running

            now = pygame.time.get_ticks()
            while now - last_tick >= play.tick_ms:
                game.tick()
                last_tick += play.tick_ms

            renderer.draw(screen, game.render(), game.state)
            clock.tick(play.fps)
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks")
    p.add_argument("--rows", type=int, default=GameConfig.rows)
    p.add_argument("--columns", type=int, default=GameConfig.columns)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--tick-ms", type=int, default=PlayConfig.tick_ms)
    p.add_argument("--log-level", default="INFO")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s - %(levelname)s - %(message)s")
    run(
        GameConfig(rows=args.rows, columns=args.columns, random_seed=args.seed),
        PlayConfig(tick_ms=args.tick_ms),
    )


if __name__ == "__main__":  # pragma: no cover
    main()
