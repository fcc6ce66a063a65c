import pytest

pygame = pytest.importorskip("pygame")

from flappy.buttons import ButtonLayout, Control
from flappy.data_models import RunState, Sound
from flappy.flappy_client import Signal, dispatch, translate


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def click(x, y, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(x, y), button=button)


@pytest.mark.parametrize("event,signal", [
    (key(pygame.K_SPACE), Signal.PRIMARY),
    (key(pygame.K_p), Signal.PAUSE),
    (key(pygame.K_n), Signal.NIGHT),
    (key(pygame.K_ESCAPE), Signal.QUIT),
    (key(pygame.K_a), None),
    (click(1, 1), Signal.CLICK),
    (click(1, 1, button=3), None),
    (pygame.event.Event(pygame.QUIT), Signal.QUIT),
])
def test_translate(event, signal):
    assert translate(event) is signal


@pytest.fixture
def layout(game):
    return ButtonLayout.from_viewport(game.config.width, game.config.height)


def test_space_flaps_from_get_ready(game, layout, sounds):
    game.start()
    assert dispatch(game, layout, key(pygame.K_SPACE)) is True
    assert game.state is RunState.PLAYING
    assert sounds[-1] is Sound.FLAP


def test_click_on_start(game, layout):
    box = layout.boxes[Control.START]
    dispatch(game, layout, click(box.x + 1, box.y + 1))
    assert game.state is RunState.GET_READY


def test_pause_key(playing, layout):
    dispatch(playing, layout, key(pygame.K_p))
    assert playing.paused is True


def test_quit(game, layout):
    assert dispatch(game, layout, pygame.event.Event(pygame.QUIT)) is False
