# ui.py
from typing import Tuple

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import (
    GRID_SIZE, PANEL_WIDTH,
    BG, EMPTY_CELL, GRID_LINE, HEAD, BODY, RED, TEXT, ACCENT,
)
from .engine import FOOD, Snapshot


def window_size(cell_size: int) -> Tuple[int, int]:
    return GRID_SIZE * cell_size + PANEL_WIDTH, GRID_SIZE * cell_size


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int], cell_size: int) -> None:
    rect = pygame.Rect(gx * cell_size, gy * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, color, rect)
    pygame.draw.rect(screen, GRID_LINE, rect, 1)


def draw_board(screen: pygame.Surface, snap: Snapshot, cell_size: int) -> None:
    grid = snap.to_grid()
    for (gy, gx), value in np.ndenumerate(grid):
        color = RED if value == FOOD else EMPTY_CELL
        draw_cell(screen, gx, gy, color, cell_size)

    # Body first, then the head on top (brighter green)
    head, body = snap.snake[0], snap.snake[1:]
    for x, y in body:
        draw_cell(screen, x, y, BODY, cell_size)
    draw_cell(screen, head[0], head[1], HEAD, cell_size)


def draw_stats(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, cell_size: int) -> None:
    left = GRID_SIZE * cell_size + 16
    rows = [
        ("Score", snap.score),
        ("High score", snap.high_score),
        ("Level", snap.level),
        ("Length", snap.length),
    ]
    for i, (label, value) in enumerate(rows):
        color = ACCENT if label == "High score" else TEXT
        txt = font.render(f"{label}: {value}", True, color)
        screen.blit(txt, (left, 16 + i * 28))

    if not snap.running and not snap.over:
        hint = "Space to start" if snap.score == 0 else "Paused - Space"
        screen.blit(font.render(hint, True, TEXT), (left, 16 + len(rows) * 28 + 12))


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int, cell_size: int) -> None:
    width = height = GRID_SIZE * cell_size
    # Dim with translucent overlay
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    title = font.render("GAME OVER", True, (240, 240, 250))
    sco   = font.render(f"Final score: {score}", True, (220, 220, 230))
    sub   = font.render("Space to play again", True, (220, 220, 230))

    screen.blit(title, title.get_rect(center=(width // 2, height // 2 - 16)))
    screen.blit(sco, sco.get_rect(center=(width // 2, height // 2 + 16)))
    screen.blit(sub, sub.get_rect(center=(width // 2, height // 2 + 44)))


def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, cell_size: int) -> None:
    screen.fill(BG)
    draw_board(screen, snap, cell_size)
    draw_stats(screen, font, snap, cell_size)
    if snap.over:
        draw_game_over(screen, font, snap.score, cell_size)
