from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from tetris_engine.game import GameSnapshot, shape


def _color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        0: (20, 20, 26),
        1: (0, 240, 240),  # I
        2: (240, 240, 0),  # O
        3: (160, 0, 240),  # T
        4: (0, 240, 0),    # S
        5: (240, 0, 0),    # Z
        6: (0, 0, 240),    # J
        7: (240, 160, 0),  # L
    }
    return palette.get(abs(v), (200, 200, 200))


def banner_for(snapshot: GameSnapshot) -> Optional[Tuple[str, Tuple[int, int, int]]]:
    if not snapshot.running:
        return f"Game Over - Score {snapshot.score} - R to restart, Q to quit", (255, 100, 100)
    if snapshot.paused:
        return "Paused - P to resume", (255, 255, 255)
    return None


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20, panel_cells: int = 7) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_cells = panel_cells
        self._font = None

    def window_size(self, width: int, height: int) -> Tuple[int, int]:
        board_w = width * self.cell_size
        board_h = height * self.cell_size
        panel_w = self.panel_cells * self.cell_size
        return board_w + panel_w + self.margin * 3, board_h + self.margin * 2

    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 26)
        return self._font

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        width = w * self.cell_size
        height = h * self.cell_size
        surf = pygame.Surface((width, height))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                v = int(state[y, x])
                color = _color_for_value(v)
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color, rect)
        return surf

    def _draw_panel(self, screen: pygame.Surface, snapshot: GameSnapshot, board_w: int) -> None:
        font = self.font()
        x0 = self.margin * 2 + board_w
        y0 = self.margin

        screen.blit(font.render("Next", True, (230, 230, 230)), (x0, y0))
        preview_y = y0 + 28
        if snapshot.next_type is not None:
            preview = shape(snapshot.next_type, 0)
            fill = _color_for_value(int(snapshot.next_type))
            for py in range(preview.shape[0]):
                for px in range(preview.shape[1]):
                    if preview[py, px]:
                        rect = pygame.Rect(
                            x0 + px * self.cell_size,
                            preview_y + py * self.cell_size,
                            self.cell_size - 1,
                            self.cell_size - 1,
                        )
                        pygame.draw.rect(screen, fill, rect)

        info_lines = [
            f"Score: {snapshot.score}",
            f"Level: {snapshot.level}",
            f"Lines: {snapshot.lines}",
            "",
            "Move: Left/Right",
            "Soft drop: Down",
            "Rotate: Up / Z",
            "Hard drop: Space",
            "Pause: P   Quit: Q",
        ]
        y_text = preview_y + 4 * self.cell_size + 10
        for i, txt in enumerate(info_lines):
            img = font.render(txt, True, (230, 230, 230))
            screen.blit(img, (x0, y_text + i * 22))

    def _draw_banner(self, screen: pygame.Surface, text: str, color: Tuple[int, int, int]) -> None:
        img = self.font().render(text, True, color)
        rect = img.get_rect(center=(screen.get_width() // 2, self.margin // 2 + 2))
        screen.blit(img, rect)

    def draw(self, screen: pygame.Surface, state: np.ndarray, snapshot: GameSnapshot) -> None:
        grid_surf = self._grid_surface(state)
        screen.fill((10, 10, 14))
        screen.blit(grid_surf, (self.margin, self.margin))
        self._draw_panel(screen, snapshot, grid_surf.get_width())
        banner = banner_for(snapshot)
        if banner is not None:
            self._draw_banner(screen, *banner)
        pygame.display.flip()

