"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from arcade_snake.grid import Cell


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def is_reverse_of(self, other: Direction | None) -> bool:
        """True when moving this way would turn straight back on *other*."""
        return other is not None and _OPPOSITES[self] is other


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Snake:
    """An immutable snake body of distinct cells.

    The head is ``body[0]``; the tail is ``body[-1]``. Movement never
    mutates a snake; :meth:`advance` returns the next one.
    """

    body: tuple[Cell, ...]

    def __post_init__(self) -> None:
        if not self.body:
            raise ValueError("Snake length must be at least 1.")
        if len(set(self.body)) != len(self.body):
            raise ValueError("Snake cells must be distinct.")

    @classmethod
    def from_cells(cls, cells: Iterable[tuple[int, int]]) -> Snake:
        return cls(tuple(Cell(x, y) for x, y in cells))

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Cell:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def next_head(self, direction: Direction) -> Cell:
        """Compute the next head position without moving."""
        dx, dy = direction.value
        return Cell(self.head.x + dx, self.head.y + dy)

    def advance(self, new_head: Cell, grow: bool = False) -> Snake:
        """Return the snake after its head moves to *new_head*.

        The tail is kept when *grow* is set, so the length increases by one.
        """
        kept = self.body if grow else self.body[:-1]
        return Snake((new_head, *kept))

    def occupies(self, cell: tuple[int, int]) -> bool:
        """Check whether the snake occupies a given cell."""
        return cell in self.body

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {"body": [list(seg) for seg in self.body]}
