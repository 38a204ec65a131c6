"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from arcade_snake.grid import Cell

if TYPE_CHECKING:
    from arcade_snake.grid import Grid
    from arcade_snake.snake import Snake

logger = logging.getLogger(__name__)


class FoodPlacer:
    """Picks a uniformly random free cell for the next piece of food.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(self, grid: Grid, rng: np.random.Generator | None = None) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()

    def place(self, snake: Snake) -> Cell:
        """Pick a uniformly random cell not covered by *snake*.

        Random cells are drawn until a free one turns up. Once the snake
        covers more than half the board the free cells are listed and one
        is chosen directly. Raises ``ValueError`` when the board is full.
        """
        if len(snake) >= self.grid.cell_count:
            raise ValueError("No free cell left for food.")
        if len(snake) * 2 > self.grid.cell_count:
            empty = self.grid.empty_cells(snake.body)
            return empty[int(self.rng.integers(len(empty)))]

        occupied = set(snake.body)
        attempts = 0
        while True:
            attempts += 1
            x, y = self.rng.integers(0, self.grid.size, size=2).tolist()
            cell = Cell(x, y)
            if cell not in occupied:
                break
        if attempts > 1:
            logger.debug("Food placed at %s after %d draws.", cell, attempts)
        return cell
