from dataclasses import fields

import pytest

from flappy.data_models import (
    Medal, Pipe, Scoreboard, SimulationConfig, medal_for, viewport_for_display,
)


def test_config_scales_with_viewport(config):
    assert config.gravity == pytest.approx(800 * 0.0006)
    assert config.jump == pytest.approx(8.0)
    assert config.bird_x == pytest.approx(116.0)
    assert config.pipe_speed == pytest.approx(2.8)
    assert config.foreground_y == pytest.approx(688.8)
    assert config.spawn_interval == 80


@pytest.mark.parametrize("size", [(400, 800), (1000, 300), (144, 200)])
def test_config_fields_are_positive(size):
    config = SimulationConfig.from_viewport(*size)
    for f in fields(config):
        assert getattr(config, f.name) > 0, f.name
    assert config.max_upward_offset < 0


def test_spawn_range_keeps_gap_on_screen(config):
    for offset in (config.max_upward_offset, 2 * config.max_upward_offset):
        pipe = Pipe(x=0.0, y=offset)
        gap_top = pipe.y + config.pipe_h
        assert gap_top > 0
        assert pipe.bottom_y(config) < config.foreground_y


def test_bottom_pipe_is_derived(config):
    pipe = Pipe(x=10.0, y=-300.0)
    assert pipe.bottom_y(config) == pytest.approx(-300.0 + config.pipe_h + config.pipe_gap)
    pipe.y = -400.0
    assert pipe.bottom_y(config) == pytest.approx(-400.0 + config.pipe_h + config.pipe_gap)


def test_viewport_for_display():
    width, height = viewport_for_display(802)
    assert height == 800
    assert width == int(800 * 0.72) - 2


@pytest.mark.parametrize("score,medal", [
    (0, None), (9, None), (10, Medal.BRONZE), (19, Medal.BRONZE),
    (20, Medal.SILVER), (30, Medal.GOLD), (39, Medal.GOLD), (40, Medal.PLATINUM), (250, Medal.PLATINUM),
])
def test_medal_for(score, medal):
    assert medal_for(score) is medal


class TestScoreboard:
    def test_first_points_below_best_are_not_new_best(self):
        board = Scoreboard(best=2)
        assert board.add_point() is False
        assert board.add_point() is False
        assert board.new_best is False
        assert board.add_point() is True
        assert (board.current, board.best, board.new_best) == (3, 3, True)

    def test_new_best_stays_set_for_the_run(self):
        board = Scoreboard(best=0)
        board.add_point()
        board.add_point()
        assert board.new_best is True
        assert board.best == 2

    def test_reset_keeps_best(self):
        board = Scoreboard(best=0)
        board.add_point()
        board.reset()
        assert (board.current, board.best, board.new_best) == (0, 1, False)
