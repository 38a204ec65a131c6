"""Gameplay configuration for the arcade snake game."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Tunable game constants.

    Supports JSON serialization so a tuned ruleset can be shared.
    Speeds are tick intervals in milliseconds: lower is faster.
    """

    # Board
    canvas_size: int = 400
    cell_size: int = 20

    # Pace
    initial_speed: int = 150
    speed_increment: int = 10
    min_speed: int = 50
    points_per_level: int = 5

    # Input
    swipe_threshold: int = 30

    # Persistence; a path of None keeps the high score in memory only
    high_score_key: str = "snakeHighScore"
    high_score_path: str | None = "~/.arcade_snake/highscore.json"

    def __post_init__(self) -> None:
        if self.canvas_size <= 0 or self.cell_size <= 0:
            raise ValueError("canvas_size and cell_size must be positive.")
        if self.canvas_size % self.cell_size:
            raise ValueError("canvas_size must be a multiple of cell_size.")
        if self.board_size < 2:
            raise ValueError("Board must be at least 2 cells wide.")
        if self.initial_speed <= 0 or self.min_speed <= 0:
            raise ValueError("Speeds must be positive.")
        if self.min_speed > self.initial_speed:
            raise ValueError("min_speed must not exceed initial_speed.")
        if self.speed_increment < 0:
            raise ValueError("speed_increment must be >= 0.")
        if self.points_per_level < 1:
            raise ValueError("points_per_level must be at least 1.")

    @property
    def board_size(self) -> int:
        """Number of cells along each board edge."""
        return self.canvas_size // self.cell_size

    def level_for_score(self, score: int) -> int:
        return score // self.points_per_level + 1

    def speed_for_level(self, level: int) -> int:
        """Tick interval for *level*, floored at ``min_speed``."""
        return max(
            self.min_speed,
            self.initial_speed - (level - 1) * self.speed_increment,
        )

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
