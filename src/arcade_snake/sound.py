"""Sound effects: tone definitions, synthesis, and playback policy."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Protocol

import numpy as np

from arcade_snake.models import GameState

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44_100


class Waveform(enum.Enum):
    SINE = "sine"
    SQUARE = "square"
    TRIANGLE = "triangle"
    SAWTOOTH = "sawtooth"


@dataclass(frozen=True)
class Tone:
    """A single synthesised note.

    When ``end_frequency`` is set the pitch glides exponentially from
    ``frequency`` to ``end_frequency`` over ``sweep_ms`` (or the whole
    duration) and then holds. ``delay_ms`` offsets the note from the moment
    it is handed to the sink; ``loop`` marks a sustained background drone.
    """

    frequency: float
    duration_ms: int
    waveform: Waveform = Waveform.SINE
    gain: float = 0.06
    delay_ms: int = 0
    end_frequency: float | None = None
    sweep_ms: int | None = None
    loop: bool = False

    def frequencies(self, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
        """Instantaneous frequency for every sample of the note."""
        n = int(round(sample_rate * self.duration_ms / 1000))
        if self.end_frequency is None:
            return np.full(n, self.frequency, dtype=np.float64)
        t = np.arange(n) / sample_rate
        sweep_s = (self.sweep_ms or self.duration_ms) / 1000
        progress = np.clip(t / sweep_s, 0.0, 1.0)
        ratio = self.end_frequency / self.frequency
        return self.frequency * np.power(ratio, progress)

    def render(self, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
        """Synthesise the note as float32 samples in ``[-gain, gain]``."""
        freqs = self.frequencies(sample_rate)
        phase = 2 * np.pi * np.cumsum(freqs) / sample_rate
        if self.waveform is Waveform.SINE:
            wave = np.sin(phase)
        elif self.waveform is Waveform.SQUARE:
            wave = np.sign(np.sin(phase))
        elif self.waveform is Waveform.TRIANGLE:
            wave = (2 / np.pi) * np.arcsin(np.sin(phase))
        else:
            wave = 2 * np.mod(phase / (2 * np.pi), 1.0) - 1
        return (self.gain * wave).astype(np.float32)


class ToneSink(Protocol):
    """Audio backend that actually makes noise."""

    def play(self, tone: Tone) -> None: ...

    def stop(self, tone: Tone) -> None: ...


class NullSink:
    """Silently drops every tone; used when no audio backend is attached."""

    def play(self, tone: Tone) -> None:
        pass

    def stop(self, tone: Tone) -> None:
        pass


LEVEL_UP_NOTES = (523, 659, 784)
LEVEL_UP_SPACING_MS = 110

BACKGROUND_TONE = Tone(110, 1000, Waveform.SINE, gain=0.02, loop=True)
GAME_OVER_TONE = Tone(
    440, 650, Waveform.SAWTOOTH, gain=0.06, end_frequency=110, sweep_ms=600,
)


class SoundManager:
    """Decides which tones to play and forwards them to a :class:`ToneSink`.

    Muting stops the background drone immediately; unmuting never starts
    it on its own, :meth:`sync_background` does that.
    """

    def __init__(
        self,
        enabled: bool = True,
        sink: ToneSink | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.enabled = enabled
        self.sink = sink if sink is not None else NullSink()
        self.rng = rng if rng is not None else np.random.default_rng()
        self._background: Tone | None = None

    @property
    def background_playing(self) -> bool:
        return self._background is not None

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        if not self.enabled:
            self.stop_background()
        logger.debug("Sound %s.", "enabled" if self.enabled else "disabled")
        return self.enabled

    def play_tone(self, tone: Tone) -> None:
        if self.enabled:
            self.sink.play(tone)

    def play_eat(self) -> None:
        """Short square blip with a little random pitch."""
        pitch = 520 + float(self.rng.uniform(0, 40))
        self.play_tone(Tone(pitch, 80, Waveform.SQUARE, gain=0.07))

    def play_level_up(self) -> None:
        for i, freq in enumerate(LEVEL_UP_NOTES):
            self.play_tone(
                Tone(
                    freq, 120, Waveform.TRIANGLE, gain=0.07,
                    delay_ms=i * LEVEL_UP_SPACING_MS,
                ),
            )

    def play_game_over(self) -> None:
        self.play_tone(GAME_OVER_TONE)

    def play_background(self) -> None:
        if not self.enabled or self._background is not None:
            return
        self._background = BACKGROUND_TONE
        self.sink.play(BACKGROUND_TONE)

    def stop_background(self) -> None:
        tone, self._background = self._background, None
        if tone is not None:
            self.sink.stop(tone)

    def sync_background(self, state: GameState) -> None:
        """Drone only while playing with sound on."""
        if self.enabled and state is GameState.PLAYING:
            self.play_background()
        else:
            self.stop_background()
