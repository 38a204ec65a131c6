"""Game state machine tying the tick engine to timers, scores and sound."""

from __future__ import annotations

import logging
from collections.abc import Callable

from arcade_snake.config import GameConfig
from arcade_snake.engine import StepResult, TickEngine
from arcade_snake.highscore import HighScoreStore
from arcade_snake.models import EventKind, GameEvent, GameSnapshot, GameState
from arcade_snake.snake import Direction
from arcade_snake.sound import SoundManager
from arcade_snake.timer import AsyncioTickTimer, TickTimer

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent], None]
TimerFactory = Callable[[Callable[[], None]], TickTimer]


class GameController:
    """Owns one game session and is the only thing allowed to change it.

    Presentation code reads :meth:`snapshot` and listens for
    :class:`GameEvent` notifications (a ``TICK`` event with a fresh
    snapshot follows every engine step); it feeds input back in through the
    action methods, which return ``False`` when the action is not legal
    in the current state.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        seed: int | None = None,
        high_scores: HighScoreStore | None = None,
        sound: SoundManager | None = None,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.engine = TickEngine(self.config, seed=seed)
        self.high_scores = (
            high_scores if high_scores is not None
            else HighScoreStore(
                self.config.high_score_path, key=self.config.high_score_key,
            )
        )
        self.sound = sound if sound is not None else SoundManager()
        factory = timer_factory if timer_factory is not None else AsyncioTickTimer
        self.timer: TickTimer = factory(self.tick)
        self.high_score = self.high_scores.load()
        self.state = GameState.READY
        self._new_high_score = False
        self._listeners: list[Listener] = []

    # --- listeners ---

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # --- actions ---

    def start(self, direction: Direction | None = None) -> bool:
        """Begin a fresh game from Ready or GameOver."""
        if self.state not in (GameState.READY, GameState.GAME_OVER):
            return False
        self._begin(direction)
        return True

    def new_game(self) -> bool:
        """Throw away a paused or finished game and start again heading right."""
        if self.state in (GameState.READY, GameState.PLAYING):
            return False
        self._begin(None)
        return True

    def change_direction(self, direction: Direction) -> bool:
        """Steer the snake, or start a game when none is running."""
        if self.state in (GameState.READY, GameState.GAME_OVER):
            return self.start(direction)
        if self.state != GameState.PLAYING:
            return False
        return self.engine.request_heading(direction)

    def pause(self) -> bool:
        if self.state != GameState.PLAYING:
            return False
        self.timer.stop()
        self._set_state(GameState.PAUSED)
        return True

    def resume(self) -> bool:
        if self.state != GameState.PAUSED:
            return False
        self.timer.start(self.engine.speed)
        self._set_state(GameState.PLAYING)
        return True

    def toggle_pause(self) -> bool:
        if self.state == GameState.PLAYING:
            return self.pause()
        return self.resume()

    def toggle_sound(self) -> bool:
        """Flip sound on or off and return the new setting."""
        enabled = self.sound.toggle()
        self.sound.sync_background(self.state)
        return enabled

    # --- tick ---

    def tick(self) -> StepResult | None:
        """Advance one step; called by the timer while playing."""
        if self.state != GameState.PLAYING:
            return None

        result = self.engine.step()
        self._emit(EventKind.TICK, snapshot=self.snapshot())

        if result.ate_food:
            self.sound.play_eat()
            self._emit(EventKind.FOOD_EATEN)

        if result.leveled_up:
            if not result.game_over:
                self.timer.restart(self.engine.speed)
            self.sound.play_level_up()
            self._emit(EventKind.LEVEL_UP)

        if result.game_over:
            self._game_over()

        return result

    # --- views ---

    @property
    def is_new_high_score(self) -> bool:
        return self._new_high_score

    def snapshot(self) -> GameSnapshot:
        engine = self.engine
        return GameSnapshot(
            state=self.state,
            board_size=engine.grid.size,
            snake=tuple(tuple(c) for c in engine.snake.body),
            food=tuple(engine.food) if engine.food is not None else None,
            score=engine.score,
            level=engine.level,
            speed=engine.speed,
            speed_multiplier=self.config.initial_speed / engine.speed,
            high_score=self.high_score,
            is_new_high_score=self._new_high_score,
            sound_enabled=self.sound.enabled,
            tick=engine.tick,
        )

    # --- internals ---

    def _begin(self, direction: Direction | None) -> None:
        # Schedule first so a timer that cannot start leaves the state alone.
        self.timer.start(self.config.initial_speed)
        self.engine.reset()
        self.engine.start(direction)
        self._new_high_score = False
        self._set_state(GameState.PLAYING)

    def _game_over(self) -> None:
        self.timer.stop()
        score = self.engine.score
        if score > self.high_score:
            self.high_score = score
            self._new_high_score = True
            self.high_scores.save(score)
        self._set_state(GameState.GAME_OVER)
        self.sound.play_game_over()
        logger.info(
            "Game over with score %d (high score %d%s).",
            score, self.high_score, ", new" if self._new_high_score else "",
        )
        self._emit(EventKind.GAME_OVER, is_new_high_score=self._new_high_score)

    def _set_state(self, state: GameState) -> None:
        previous, self.state = self.state, state
        self.sound.sync_background(state)
        logger.info("Game state %s -> %s.", previous.value, state.value)
        self._emit(EventKind.STATE_CHANGED)

    def _emit(
        self,
        kind: EventKind,
        is_new_high_score: bool = False,
        snapshot: GameSnapshot | None = None,
    ) -> None:
        event = GameEvent(
            kind=kind,
            state=self.state,
            score=self.engine.score,
            level=self.engine.level,
            speed=self.engine.speed,
            is_new_high_score=is_new_high_score,
            snapshot=snapshot,
        )
        for listener in list(self._listeners):
            listener(event)
