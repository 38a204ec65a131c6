"""Tests for tone synthesis and the sound policy."""

import numpy as np
import pytest

from arcade_snake.models import GameState
from arcade_snake.sound import (
    BACKGROUND_TONE,
    GAME_OVER_TONE,
    SoundManager,
    Tone,
    Waveform,
)


class TestToneRender:
    def test_length_and_dtype(self):
        samples = Tone(440, 100).render(sample_rate=8000)
        assert samples.dtype == np.float32
        assert samples.shape == (800,)

    @pytest.mark.parametrize("waveform", list(Waveform))
    def test_amplitude_bounded_by_gain(self, waveform):
        samples = Tone(300, 50, waveform, gain=0.1).render(sample_rate=8000)
        assert np.max(np.abs(samples)) <= 0.1 + 1e-6
        assert np.max(np.abs(samples)) > 0.05

    def test_square_is_two_level(self):
        samples = Tone(200, 50, Waveform.SQUARE, gain=0.5).render(8000)
        assert set(np.round(np.abs(samples[samples != 0]), 4)) == {0.5}

    def test_sweep_glides_then_holds(self):
        freqs = GAME_OVER_TONE.frequencies(sample_rate=1000)
        assert freqs[0] == pytest.approx(440)
        assert freqs[600] == pytest.approx(110)
        assert freqs[-1] == pytest.approx(110)
        assert np.all(np.diff(freqs) <= 0)


class TestSoundManager:
    def test_eat_blip(self, sink):
        sound = SoundManager(sink=sink, rng=np.random.default_rng(0))
        sound.play_eat()
        (tone,) = sink.played
        assert 520 <= tone.frequency <= 560
        assert tone.waveform is Waveform.SQUARE
        assert tone.duration_ms == 80

    def test_level_up_arpeggio(self, sink):
        SoundManager(sink=sink).play_level_up()
        assert [t.frequency for t in sink.played] == [523, 659, 784]
        assert [t.delay_ms for t in sink.played] == [0, 110, 220]

    def test_disabled_plays_nothing(self, sink):
        sound = SoundManager(enabled=False, sink=sink)
        sound.play_eat()
        sound.play_game_over()
        sound.play_background()
        assert sink.played == []

    def test_background_started_once(self, sink):
        sound = SoundManager(sink=sink)
        sound.play_background()
        sound.play_background()
        assert sink.played == [BACKGROUND_TONE]
        sound.stop_background()
        assert sink.stopped == [BACKGROUND_TONE]

    def test_toggle_off_stops_background(self, sink):
        sound = SoundManager(sink=sink)
        sound.play_background()
        assert sound.toggle() is False
        assert not sound.background_playing
        assert sound.toggle() is True
        assert not sound.background_playing

    @pytest.mark.parametrize(
        ("state", "expected"),
        [
            (GameState.PLAYING, True),
            (GameState.PAUSED, False),
            (GameState.READY, False),
            (GameState.GAME_OVER, False),
        ],
    )
    def test_sync_background(self, sink, state, expected):
        sound = SoundManager(sink=sink)
        sound.sync_background(state)
        assert sound.background_playing is expected
