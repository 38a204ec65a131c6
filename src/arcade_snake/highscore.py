"""Durable high-score storage with an in-memory fallback."""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_KEY = "snakeHighScore"


class HighScoreStore:
    """Keeps one integer high score in a JSON key/value file.

    The file may hold other keys; only ``key`` is read or written. When
    the file cannot be read or written the store logs a warning and keeps
    serving the last known value from memory for the rest of the session.
    ``~`` in *path* is expanded. Passing ``path=None`` gives a purely
    in-memory store.
    """

    def __init__(self, path: str | Path | None = None, key: str = DEFAULT_KEY) -> None:
        self._path = Path(path).expanduser() if path is not None else None
        self.key = key
        self._value = 0
        self._durable = self._path is not None

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def durable(self) -> bool:
        """False once persistence has failed or when no path was given."""
        return self._durable

    def load(self) -> int:
        """Read the stored high score. A missing key or file reads as 0."""
        if not self._durable:
            return self._value
        try:
            raw = self._read_all().get(self.key, 0)
        except (OSError, ValueError) as exc:
            logger.warning(
                "High score unavailable at %s (%s); using memory only.",
                self._path, exc,
            )
            self._durable = False
            return self._value
        self._value = _coerce_score(raw)
        return self._value

    def save(self, score: int) -> None:
        """Record *score*. Failures degrade the store to memory only."""
        if score < 0:
            raise ValueError("High score must be >= 0.")
        self._value = score
        if not self._durable:
            return
        try:
            data = self._read_all()
        except (OSError, ValueError):
            data = {}
        data[self.key] = score
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(data, indent=2))
        except OSError as exc:
            logger.warning(
                "Could not persist high score to %s (%s); using memory only.",
                self._path, exc,
            )
            self._durable = False
            return
        logger.info("High score %d saved to %s", score, self._path)

    def _read_all(self) -> dict:
        if not self._path.exists():
            return {}
        data = json.loads(self._path.read_text())
        if not isinstance(data, dict):
            raise ValueError("high score file is not a JSON object")
        return data


def _coerce_score(raw: object) -> int:
    """Mirror a lenient integer parse: anything unusable becomes 0."""
    if isinstance(raw, bool):
        return 0
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return 0
    return max(value, 0)
