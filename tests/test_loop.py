import pytest

from flappy.loop import FixedStepLoop


def make_loop(**kwargs):
    steps = []
    loop = FixedStepLoop(lambda: steps.append(1), tick_time=0.25, **kwargs)
    return loop, steps


def test_partial_time_accumulates():
    loop, steps = make_loop()
    assert loop.advance(0.125) == 0
    assert loop.advance(0.125) == 1
    assert len(steps) == 1
    assert loop.accumulator == pytest.approx(0.0)


def test_many_steps_in_one_frame():
    loop, steps = make_loop()
    assert loop.advance(0.75) == 3
    assert loop.ticks == 3


def test_draw_frames_without_time_do_not_step():
    loop, steps = make_loop()
    for _ in range(10):
        loop.advance(0.0)
    assert steps == []


def test_backlog_is_dropped_after_max_steps():
    loop, steps = make_loop(max_steps=4)
    assert loop.advance(10.0) == 4
    assert loop.accumulator == 0.0
    assert loop.advance(0.25) == 1
