"""Tick engine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from arcade_snake.config import GameConfig
from arcade_snake.food import FoodPlacer
from arcade_snake.grid import Cell, Grid
from arcade_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)


class EndReason(enum.Enum):
    """Why a step ended the game."""

    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"


@dataclass(frozen=True)
class StepResult:
    """What happened during a single tick."""

    moved: bool = False
    ate_food: bool = False
    leveled_up: bool = False
    end_reason: EndReason | None = None

    @property
    def game_over(self) -> bool:
        return self.end_reason is not None


class TickEngine:
    """Single-snake, step-based game engine.

    The engine is the only writer of the snake, food, score, level and
    speed. Input only ever reaches it through :meth:`request_heading`,
    which buffers at most one turn until the next :meth:`step`.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(self.config.board_size)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.food_placer = FoodPlacer(self.grid, rng=self.rng)
        self.reset()

    def reset(self) -> None:
        """Put a one-cell snake in the centre and clear all progress."""
        self.snake = Snake((self.grid.center(),))
        self.heading: Direction | None = None
        self._pending_heading: Direction | None = None
        self.food: Cell | None = self.food_placer.place(self.snake)
        self.score = 0
        self.level = 1
        self.speed = self.config.initial_speed
        self.tick = 0

    @property
    def direction_locked(self) -> bool:
        """True while a turn is buffered and the snake has not moved yet."""
        return self._pending_heading is not None

    def start(self, direction: Direction | None = None) -> None:
        """Set the opening heading, defaulting to right."""
        self.heading = direction if direction is not None else Direction.RIGHT
        self._pending_heading = None

    def request_heading(self, direction: Direction) -> bool:
        """Buffer one turn for the next step.

        Returns ``False`` when a turn is already pending or *direction*
        would reverse the snake onto its own neck.
        """
        if self._pending_heading is not None:
            return False
        if direction.is_reverse_of(self.heading):
            return False
        self._pending_heading = direction
        return True

    def step(self) -> StepResult:
        """Advance the game by one tick."""
        if self._pending_heading is not None:
            self.heading = self._pending_heading
            self._pending_heading = None

        if self.heading is None:
            return StepResult()

        new_head = self.snake.next_head(self.heading)

        # --- boundary check ---
        if not self.grid.in_bounds(*new_head):
            return self._end(EndReason.WALL)

        # --- self-collision check, tail included ---
        if self.snake.occupies(new_head):
            return self._end(EndReason.SELF)

        # --- move ---
        ate_food = new_head == self.food
        self.snake = self.snake.advance(new_head, grow=ate_food)
        self.tick += 1

        if not ate_food:
            return StepResult(moved=True)

        self.score += 1
        leveled_up = self._check_level_up()
        if len(self.snake) >= self.grid.cell_count:
            # Nowhere left to put food.
            self.food = None
            return self._end(
                EndReason.BOARD_FULL,
                moved=True, ate_food=True, leveled_up=leveled_up,
            )
        self.food = self.food_placer.place(self.snake)
        return StepResult(moved=True, ate_food=True, leveled_up=leveled_up)

    def _check_level_up(self) -> bool:
        new_level = self.config.level_for_score(self.score)
        if new_level <= self.level:
            return False
        self.level = new_level
        self.speed = self.config.speed_for_level(new_level)
        logger.info(
            "Reached level %d; tick interval now %d ms.", self.level, self.speed,
        )
        return True

    def _end(self, reason: EndReason, **flags: bool) -> StepResult:
        logger.info(
            "Snake stopped by %s at tick %d with score %d.",
            reason.value, self.tick, self.score,
        )
        return StepResult(end_reason=reason, **flags)

    def to_dict(self) -> dict:
        """Return the engine state as a serializable dict."""
        return {
            "tick": self.tick,
            "score": self.score,
            "level": self.level,
            "speed": self.speed,
            "heading": self.heading.name if self.heading else None,
            "snake": self.snake.to_dict(),
            "food": list(self.food) if self.food is not None else None,
            "grid": self.grid.to_dict(),
        }
