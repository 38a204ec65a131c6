"""Board geometry for the snake game."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

import numpy as np


class Cell(NamedTuple):
    """A board coordinate. ``x`` grows rightwards, ``y`` grows downwards."""

    x: int
    y: int


class Grid:
    """Square game board of ``size`` × ``size`` cells.

    The board itself holds no state; occupancy is computed on demand from
    the cells passed in, so a ``Grid`` can be shared freely.
    """

    def __init__(self, size: int = 20) -> None:
        if size < 2:
            raise ValueError("Grid size must be at least 2.")
        self.size = size

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the board."""
        return 0 <= x < self.size and 0 <= y < self.size

    def center(self) -> Cell:
        return Cell(self.size // 2, self.size // 2)

    def occupancy(self, cells: Iterable[tuple[int, int]]) -> np.ndarray:
        """Return a ``(size, size)`` boolean mask indexed ``[y, x]``."""
        mask = np.zeros((self.size, self.size), dtype=bool)
        for x, y in cells:
            mask[y, x] = True
        return mask

    def empty_cells(self, occupied: Iterable[tuple[int, int]]) -> list[Cell]:
        """Return every cell not in *occupied*, row by row."""
        ys, xs = np.where(~self.occupancy(occupied))
        return [Cell(x, y) for x, y in zip(xs.tolist(), ys.tolist(), strict=True)]

    def to_dict(self) -> dict:
        return {"size": self.size}
