import pytest

pygame = pytest.importorskip("pygame")

from flappy_dragon.constants import NAVY, RED, BLACK
from flappy_dragon.context import Key
from flappy_dragon.pygame_context import PygameContext, map_key


def test_key_mapping():
    assert map_key(pygame.K_SPACE) is Key.FLAP
    assert map_key(pygame.K_p) is Key.PLAY
    assert map_key(pygame.K_q) is Key.QUIT
    assert map_key(pygame.K_a) is Key.OTHER


@pytest.fixture
def window(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    ctx = PygameContext(fps=0, cell_size=4)
    yield ctx
    ctx.close()


def test_window_matches_grid(window):
    assert window.screen.get_size() == (80 * 4, 50 * 4)


def test_first_key_of_frame_wins(window):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q))
    window.begin_frame()
    assert window.key is Key.FLAP
    assert window.frame_time_ms >= 0.0

    window.begin_frame()
    assert window.key is None


def test_close_event_requests_quit(window):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    window.begin_frame()
    assert window.quitting


def test_present_draws_cells(window):
    window.cls_bg(NAVY)
    window.set(0, 0, RED, BLACK, "|")
    window.present()
    assert window.screen.get_at((4 * 10 + 1, 4 * 10 + 1))[:3] == NAVY
