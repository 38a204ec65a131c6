"""Shared fixtures: a hand-cranked timer and controller factory."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from arcade_snake.config import GameConfig
from arcade_snake.game import GameController
from arcade_snake.highscore import HighScoreStore
from arcade_snake.sound import SoundManager, Tone


class ManualTimer:
    """Timer that only fires when a test calls :meth:`fire`.

    Setting ``fail_start`` makes the next ``start`` raise, like an asyncio
    timer with no running loop.
    """

    def __init__(self, callback: Callable[[], None]) -> None:
        self.callback = callback
        self.fail_start = False
        self.running = False
        self.interval_ms: int | None = None
        self.history: list[tuple] = []

    def start(self, interval_ms: int) -> None:
        if self.fail_start:
            raise RuntimeError("no running event loop")
        self.running = True
        self.interval_ms = interval_ms
        self.history.append(("start", interval_ms))

    def stop(self) -> None:
        if self.running:
            self.history.append(("stop",))
        self.running = False

    def restart(self, interval_ms: int) -> None:
        self.stop()
        self.start(interval_ms)

    def fire(self, times: int = 1) -> int:
        """Fire up to *times* ticks, stopping early if the timer stops."""
        fired = 0
        for _ in range(times):
            if not self.running:
                break
            self.callback()
            fired += 1
        return fired


class RecordingSink:
    def __init__(self) -> None:
        self.played: list[Tone] = []
        self.stopped: list[Tone] = []

    def play(self, tone: Tone) -> None:
        self.played.append(tone)

    def stop(self, tone: Tone) -> None:
        self.stopped.append(tone)


@pytest.fixture()
def sink():
    return RecordingSink()


@pytest.fixture()
def make_controller(tmp_path, sink):
    """Build a controller driven by a :class:`ManualTimer`."""

    def _make(config: GameConfig | None = None, seed: int = 0, **kwargs):
        kwargs.setdefault(
            "high_scores", HighScoreStore(tmp_path / "scores.json"),
        )
        kwargs.setdefault("sound", SoundManager(sink=sink))
        kwargs.setdefault("timer_factory", ManualTimer)
        return GameController(config, seed=seed, **kwargs)

    return _make
