"""Tests for the FoodPlacer module."""

import numpy as np
import pytest

from arcade_snake.food import FoodPlacer
from arcade_snake.grid import Grid
from arcade_snake.snake import Snake


class TestFoodPlacement:
    def test_in_bounds(self):
        grid = Grid(size=5)
        placer = FoodPlacer(grid, rng=np.random.default_rng(42))
        snake = Snake.from_cells([(2, 2)])
        for _ in range(50):
            cell = placer.place(snake)
            assert grid.in_bounds(*cell)

    def test_never_on_snake(self):
        grid = Grid(size=4)
        placer = FoodPlacer(grid, rng=np.random.default_rng(0))
        # Every cell but (3, 3) is snake.
        cells = [(x, y) for y in range(4) for x in range(4)]
        path = [c for c in cells if c != (3, 3)]
        snake = Snake.from_cells(path)
        for _ in range(20):
            assert placer.place(snake) == (3, 3)

    def test_full_board_raises(self):
        grid = Grid(size=2)
        placer = FoodPlacer(grid)
        snake = Snake.from_cells([(0, 0), (1, 0), (1, 1), (0, 1)])
        with pytest.raises(ValueError, match="No free cell"):
            placer.place(snake)

    def test_deterministic(self):
        """Same seed produces the same food sequence."""
        assert self._sequence(7) == self._sequence(7)

    def test_different_seeds(self):
        assert self._sequence(1) != self._sequence(2)

    def test_roughly_uniform(self):
        grid = Grid(size=3)
        placer = FoodPlacer(grid, rng=np.random.default_rng(123))
        snake = Snake.from_cells([(1, 1)])
        counts: dict = {}
        for _ in range(4000):
            cell = placer.place(snake)
            counts[cell] = counts.get(cell, 0) + 1
        assert len(counts) == 8
        assert min(counts.values()) > 350

    @staticmethod
    def _sequence(seed: int) -> list:
        grid = Grid(size=20)
        placer = FoodPlacer(grid, rng=np.random.default_rng(seed))
        snake = Snake.from_cells([(10, 10)])
        return [placer.place(snake) for _ in range(5)]
