"""Drawing game snapshots into pixel frames and status text."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from arcade_snake.config import GameConfig
from arcade_snake.models import GameSnapshot, GameState


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    value = value.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


BACKGROUND = hex_to_rgb("#121212")
FOOD = hex_to_rgb("#e91e63")
HEAD = hex_to_rgb("#4caf50")
BODY = hex_to_rgb("#81c784")
OUTLINE = hex_to_rgb("#2e7d32")


class FrameRenderer:
    """Rasterises a :class:`GameSnapshot` onto an RGB canvas.

    Frames are ``(canvas_size, canvas_size, 3)`` uint8 arrays indexed
    ``[py, px]``. The renderer only reads snapshots.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else GameConfig()

    @property
    def canvas_size(self) -> int:
        return self.config.canvas_size

    def render(self, snapshot: GameSnapshot) -> np.ndarray:
        frame = np.empty((self.canvas_size, self.canvas_size, 3), dtype=np.uint8)
        frame[:, :] = BACKGROUND
        if snapshot.food is not None:
            self._draw_food(frame, *snapshot.food)
        for i, (x, y) in enumerate(snapshot.snake):
            self._draw_segment(frame, x, y, HEAD if i == 0 else BODY)
        return frame

    def _draw_food(self, frame: np.ndarray, x: int, y: int) -> None:
        cs = self.config.cell_size
        x0, y0 = x * cs, y * cs
        radius = cs / 2.2
        # Sample at pixel centres relative to the cell centre.
        offsets = np.arange(cs) + 0.5 - cs / 2
        dy, dx = np.meshgrid(offsets, offsets, indexing="ij")
        inside = dx * dx + dy * dy <= radius * radius
        frame[y0:y0 + cs, x0:x0 + cs][inside] = FOOD

    def _draw_segment(
        self, frame: np.ndarray, x: int, y: int, color: tuple[int, int, int],
    ) -> None:
        cs = self.config.cell_size
        x0, y0 = x * cs, y * cs
        frame[y0:y0 + cs, x0:x0 + cs] = color
        if cs < 4:
            return
        top, bottom = y0 + 1, y0 + cs - 2
        left, right = x0 + 1, x0 + cs - 2
        frame[top, left:right + 1] = OUTLINE
        frame[bottom, left:right + 1] = OUTLINE
        frame[top:bottom + 1, left] = OUTLINE
        frame[top:bottom + 1, right] = OUTLINE


@dataclass(frozen=True)
class Hud:
    """Text for the score bar. ``high_score`` is ``None`` when hidden."""

    score: str
    level: str
    speed: str
    high_score: str | None


@dataclass(frozen=True)
class Overlay:
    title: str
    message: str
    buttons: tuple[str, ...] = ()


def hud(snapshot: GameSnapshot) -> Hud:
    return Hud(
        score=f"Score: {snapshot.score}",
        level=f"Level: {snapshot.level}",
        speed=f"Speed: {snapshot.speed_multiplier:.1f}x",
        high_score=(
            f"High Score: {snapshot.high_score}" if snapshot.high_score > 0 else None
        ),
    )


def overlay(snapshot: GameSnapshot) -> Overlay | None:
    """Return the modal shown over the board, or ``None`` while playing."""
    if snapshot.state == GameState.READY:
        return Overlay(
            "Ready to Play!",
            "Press any key, touch the screen, or use the buttons to start",
        )
    if snapshot.state == GameState.PAUSED:
        return Overlay(
            "Game Paused", "Press SPACE to resume", ("Resume", "Restart"),
        )
    if snapshot.state == GameState.GAME_OVER:
        if snapshot.is_new_high_score:
            return Overlay(
                "New High Score! \N{PARTY POPPER}",
                f"Amazing! You scored {snapshot.score} points!\n"
                "Press SPACE or tap Play Again to restart",
                ("Play Again",),
            )
        return Overlay(
            "Game Over",
            f"Final Score: {snapshot.score}\n"
            f"High Score: {snapshot.high_score}\n"
            "Press SPACE or tap Play Again to restart",
            ("Play Again",),
        )
    return None
