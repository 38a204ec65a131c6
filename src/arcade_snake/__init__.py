"""Arcade Snake — grid, tick engine, and game state machine."""

from arcade_snake.config import GameConfig
from arcade_snake.controls import InputRouter
from arcade_snake.engine import EndReason, StepResult, TickEngine
from arcade_snake.food import FoodPlacer
from arcade_snake.game import GameController
from arcade_snake.grid import Cell, Grid
from arcade_snake.highscore import HighScoreStore
from arcade_snake.models import EventKind, GameEvent, GameSnapshot, GameState
from arcade_snake.render import FrameRenderer
from arcade_snake.snake import Direction, Snake
from arcade_snake.sound import SoundManager, Tone
from arcade_snake.timer import AsyncioTickTimer, TickTimer

__all__ = [
    "AsyncioTickTimer",
    "Cell",
    "Direction",
    "EndReason",
    "EventKind",
    "FoodPlacer",
    "FrameRenderer",
    "GameConfig",
    "GameController",
    "GameEvent",
    "GameSnapshot",
    "GameState",
    "Grid",
    "HighScoreStore",
    "InputRouter",
    "Snake",
    "SoundManager",
    "StepResult",
    "TickEngine",
    "TickTimer",
    "Tone",
]
