"""Pydantic models for the state snapshots and notifications the game emits."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class GameState(str, enum.Enum):
    """Lifecycle states of a game session."""

    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class EventKind(str, enum.Enum):
    """Discrete notifications for redraws, sound and visual effects."""

    TICK = "tick"
    FOOD_EATEN = "food_eaten"
    LEVEL_UP = "level_up"
    GAME_OVER = "game_over"
    STATE_CHANGED = "state_changed"


class GameSnapshot(BaseModel):
    """Read-only view of everything a presentation layer may draw.

    ``food`` is ``None`` only after the snake has filled the board.
    """

    model_config = ConfigDict(frozen=True)

    state: GameState
    board_size: int = Field(ge=2)
    snake: tuple[tuple[int, int], ...]
    food: tuple[int, int] | None
    score: int = Field(ge=0)
    level: int = Field(ge=1)
    speed: int = Field(gt=0)
    speed_multiplier: float
    high_score: int = Field(ge=0)
    is_new_high_score: bool = False
    sound_enabled: bool
    tick: int = Field(ge=0)


class GameEvent(BaseModel):
    """A notification raised by the game controller.

    ``TICK`` events carry the snapshot taken right after the step.
    """

    model_config = ConfigDict(frozen=True)

    kind: EventKind
    state: GameState
    score: int = Field(ge=0)
    level: int = Field(ge=1)
    speed: int = Field(gt=0)
    is_new_high_score: bool = False
    snapshot: GameSnapshot | None = None
