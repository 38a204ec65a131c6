"""Tests for the game configuration dataclass."""

import json

import pytest

from arcade_snake.config import GameConfig


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.board_size == 20
        assert cfg.initial_speed == 150
        assert cfg.speed_increment == 10
        assert cfg.min_speed == 50
        assert cfg.points_per_level == 5
        assert cfg.swipe_threshold == 30
        assert cfg.high_score_path.endswith("highscore.json")

    def test_board_size_from_canvas(self):
        cfg = GameConfig(canvas_size=300, cell_size=15)
        assert cfg.board_size == 20

    def test_to_dict_serializable(self):
        serialized = json.dumps(GameConfig().to_dict())
        assert isinstance(serialized, str)

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(initial_speed=200, points_per_level=3)
        path = tmp_path / "nested" / "game.json"
        cfg.save(path)
        assert path.exists()
        assert GameConfig.load(path) == cfg


class TestGameConfigValidation:
    def test_canvas_must_divide_into_cells(self):
        with pytest.raises(ValueError, match="multiple"):
            GameConfig(canvas_size=410, cell_size=20)

    def test_board_too_small(self):
        with pytest.raises(ValueError, match="at least 2"):
            GameConfig(canvas_size=20, cell_size=20)

    def test_min_speed_above_initial(self):
        with pytest.raises(ValueError, match="min_speed"):
            GameConfig(initial_speed=40, min_speed=50)

    def test_points_per_level(self):
        with pytest.raises(ValueError, match="points_per_level"):
            GameConfig(points_per_level=0)

    def test_non_positive_sizes(self):
        with pytest.raises(ValueError, match="positive"):
            GameConfig(cell_size=0)


class TestLevelAndSpeed:
    def test_level_for_score(self):
        cfg = GameConfig(points_per_level=5)
        assert cfg.level_for_score(0) == 1
        assert cfg.level_for_score(4) == 1
        assert cfg.level_for_score(5) == 2
        assert cfg.level_for_score(14) == 3

    def test_speed_for_level(self):
        cfg = GameConfig()
        assert cfg.speed_for_level(1) == 150
        assert cfg.speed_for_level(2) == 140
        assert cfg.speed_for_level(11) == 50

    def test_speed_floored_and_non_increasing(self):
        cfg = GameConfig()
        speeds = [cfg.speed_for_level(level) for level in range(1, 40)]
        assert speeds == sorted(speeds, reverse=True)
        assert min(speeds) == cfg.min_speed
