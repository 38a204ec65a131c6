"""Translating keyboard, swipe, and button input into controller actions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from arcade_snake.models import GameState
from arcade_snake.snake import Direction

if TYPE_CHECKING:
    from arcade_snake.game import GameController

logger = logging.getLogger(__name__)

KEY_DIRECTIONS: dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "w": Direction.UP,
    "W": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "s": Direction.DOWN,
    "S": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "a": Direction.LEFT,
    "A": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "d": Direction.RIGHT,
    "D": Direction.RIGHT,
}

SPACE = " "


def swipe_direction(dx: float, dy: float, threshold: float) -> Direction | None:
    """Classify a gesture by its dominant axis.

    Travel must exceed *threshold* along that axis; ties count as vertical.
    """
    if abs(dx) > abs(dy):
        if dx > threshold:
            return Direction.RIGHT
        if dx < -threshold:
            return Direction.LEFT
        return None
    if dy > threshold:
        return Direction.DOWN
    if dy < -threshold:
        return Direction.UP
    return None


class InputRouter:
    """Feeds raw input events into a :class:`GameController`.

    Every handler returns ``True`` when the event was consumed, so a host
    can decide whether to suppress default behaviour (scrolling and the
    like).
    """

    def __init__(self, controller: GameController) -> None:
        self.controller = controller
        self._touch_start: tuple[float, float] | None = None

    def key_down(self, key: str) -> bool:
        """Arrow keys and WASD steer; Space starts, pauses, or resumes."""
        if key == SPACE:
            if self.controller.state in (GameState.READY, GameState.GAME_OVER):
                self.controller.start()
            else:
                self.controller.toggle_pause()
            return True
        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            return False
        self.controller.change_direction(direction)
        return True

    def nav_press(self, direction: Direction) -> bool:
        """On-screen D-pad button."""
        return self.controller.change_direction(direction)

    def touch_start(self, touches: list[tuple[float, float]]) -> bool:
        """Begin tracking a swipe; a tap also starts an idle game."""
        if len(touches) == 1:
            self._touch_start = touches[0]
        if self.controller.state in (GameState.READY, GameState.GAME_OVER):
            return self.controller.start()
        return False

    def touch_end(self, point: tuple[float, float]) -> bool:
        """Finish a swipe and steer if it travelled far enough."""
        start, self._touch_start = self._touch_start, None
        if start is None:
            return False
        direction = swipe_direction(
            point[0] - start[0],
            point[1] - start[1],
            self.controller.config.swipe_threshold,
        )
        if direction is None:
            return False
        logger.debug("Swipe %s.", direction.name)
        return self.controller.change_direction(direction)
