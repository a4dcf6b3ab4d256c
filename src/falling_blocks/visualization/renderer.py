from __future__ import annotations

from typing import Optional, Tuple

import pygame

from falling_blocks.game import Grid, State


Color = Tuple[int, int, int]

EMPTY_COLOR: Color = (20, 20, 26)
FILLED_COLOR: Color = (0, 240, 240)

CAPTIONS = {
    State.END: ("GAME OVER", (240, 60, 60)),
    State.PAUSED: ("Paused", (60, 220, 90)),
}


def status_caption(state: State) -> Optional[Tuple[str, Color]]:
    return CAPTIONS.get(state)


class Renderer:
    def __init__(self, cell_size: int = 28, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font: Optional[pygame.font.Font] = None

    def screen_size(self, rows: int, columns: int) -> Tuple[int, int]:
        return columns * self.cell_size + self.margin * 2, rows * self.cell_size + self.margin * 2

    def _grid_surface(self, grid: Grid) -> pygame.Surface:
        surf = pygame.Surface((grid.columns * self.cell_size, grid.rows * self.cell_size))
        surf.fill((30, 30, 36))
        for row in range(grid.rows):
            # row 0 is the bottom of the level
            y = (grid.rows - row - 1) * self.cell_size
            for col in range(grid.columns):
                color = FILLED_COLOR if grid.cells[row, col] else EMPTY_COLOR
                rect = pygame.Rect(col * self.cell_size, y, self.cell_size - 1, self.cell_size - 1)
                pygame.draw.rect(surf, color, rect)
        return surf

    def _draw_caption(self, screen: pygame.Surface, state: State) -> None:
        caption = status_caption(state)
        if caption is None:
            return
        if self._font is None:
            self._font = pygame.font.SysFont(None, 36)
        text, color = caption
        img = self._font.render(text, True, color)
        rect = img.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
        screen.blit(img, rect)

    def draw(self, screen: pygame.Surface, grid: Grid, state: State) -> None:
        grid_surf = self._grid_surface(grid)
        screen.fill((10, 10, 14))
        screen.blit(grid_surf, (self.margin, self.margin))
        self._draw_caption(screen, state)
        pygame.display.flip()
