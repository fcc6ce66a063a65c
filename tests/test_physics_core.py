import pytest

from flappy.constants import FALLING_ROTATION, RISING_ROTATION
from flappy.data_models import Bird, RunState
from flappy.physics_core import BirdPhysics


@pytest.fixture
def physics():
    return BirdPhysics()


@pytest.fixture
def bird(physics, config):
    b = Bird()
    physics.reset(b, config)
    return b


def test_reset_puts_bird_at_start(bird, config):
    assert (bird.x, bird.y) == (config.bird_x, config.bird_rest_y)
    assert bird.velocity == 0.0
    assert bird.rotation == 0.0


@pytest.mark.parametrize("prior", [-30.0, -8.0, 0.0, 3.5, 50.0])
def test_flap_sets_exact_impulse(physics, bird, config, prior):
    bird.velocity = prior
    physics.flap(bird, config)
    assert bird.velocity == -config.jump


def test_gravity_integrates_velocity_then_position(physics, bird, config):
    bird.velocity = 1.0
    y = bird.y
    physics.apply_gravity(bird, config)
    assert bird.velocity == pytest.approx(1.0 + config.gravity)
    assert bird.y == pytest.approx(y + 1.0 + config.gravity)


def test_velocity_grows_by_gravity_each_playing_tick(physics, bird, config):
    physics.flap(bird, config)
    previous = bird.velocity
    for frame in range(20):
        physics.update(bird, config, RunState.PLAYING, frame)
        assert bird.velocity - previous == pytest.approx(config.gravity)
        previous = bird.velocity


def test_get_ready_pins_bird_at_rest(physics, bird, config):
    bird.y = 10.0
    bird.velocity = 12.0
    bird.rotation = FALLING_ROTATION
    for frame in range(500):
        grounded = physics.update(bird, config, RunState.GET_READY, frame)
        assert grounded is False
        assert bird.y == config.bird_rest_y
        assert bird.rotation == 0.0


def test_home_leaves_bird_still(physics, bird, config):
    y = bird.y
    for frame in range(50):
        physics.update(bird, config, RunState.HOME, frame)
    assert bird.y == y


def test_tilt_is_two_state(physics, bird, config):
    bird.velocity = config.jump
    bird.frame = 2
    physics.tilt(bird, config)
    assert bird.rotation == FALLING_ROTATION
    assert bird.frame == 0

    bird.velocity = config.jump - 0.01
    physics.tilt(bird, config)
    assert bird.rotation == RISING_ROTATION


def test_wing_animation_period(physics, bird):
    frames_seen = []
    for frame in range(1, 13):
        physics.animate(bird, RunState.PLAYING, frame)
        frames_seen.append(bird.frame)
    # Advances on frames 4, 8 and 12, wrapping after three.
    assert frames_seen == [0, 0, 0, 1, 1, 1, 1, 2, 2, 2, 2, 0]

    bird.frame = 0
    physics.animate(bird, RunState.GET_READY, 4)
    assert bird.frame == 0
    physics.animate(bird, RunState.GET_READY, 6)
    assert bird.frame == 1


def test_landing_clamps_to_foreground(physics, bird, config):
    ground = config.foreground_y - config.bird_h / 2
    bird.y = ground - 1
    bird.velocity = 5.0
    grounded = physics.update(bird, config, RunState.PLAYING, 1)
    assert grounded is True
    assert bird.y == ground


def test_above_ground_is_not_grounded(physics, bird, config):
    assert physics.update(bird, config, RunState.PLAYING, 1) is False
