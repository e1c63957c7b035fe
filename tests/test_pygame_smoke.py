import pytest

pygame = pytest.importorskip("pygame")

from gorillas_game.core.session import AIMING, CELEBRATING, IN_FLIGHT  # noqa: E402
from gorillas_game.pygame import config  # noqa: E402
from gorillas_game.pygame.app import PygameGorillas  # noqa: E402

pytestmark = pytest.mark.smoke


@pytest.fixture
def app(monkeypatch, tmp_path, flat_settings):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.setattr(config, "_SETTINGS_PATH", tmp_path / "settings.json")
    client = PygameGorillas(settings=flat_settings, window_size=(668, 400))
    yield client
    pygame.quit()


def _mouse(event_type, pos, **extra):
    return pygame.event.Event(event_type, pos=pos, **extra)


def test_boots_and_draws_a_frame(app):
    app._draw()

    assert app.render_state.phase == AIMING
    assert app.new_game_button is None


def test_drag_and_release_throws_the_bomb(app):
    # bomb rests at world (96, 147), which is screen (96, 253) at scale 1
    app.input.process_event(_mouse(pygame.MOUSEBUTTONDOWN, (96, 253), button=1))
    assert app.session.dragging

    app.input.process_event(_mouse(pygame.MOUSEMOTION, (46, 228), rel=(-50, -25), buttons=(1, 0, 0)))
    assert app.session.readouts[1].magnitude > 0

    app.input.process_event(_mouse(pygame.MOUSEBUTTONUP, (46, 228), button=1))
    assert app.session.phase == IN_FLIGHT

    app._update()
    app._draw()


def test_new_game_button_after_a_win(app):
    session = app.session
    session.begin_aim()
    session.update_aim_vector(-10.0, 10.0)
    app.throw()
    session.bomb.x, session.bomb.y = 544.0, 80.0
    session.advance(1.0)
    assert session.phase == CELEBRATING

    app._draw()
    assert app.new_game_button is not None

    app.input.process_event(_mouse(pygame.MOUSEBUTTONDOWN, app.new_game_button.center, button=1))

    assert session.phase == AIMING
    assert session.generation == 1


def test_keyboard_new_game(app):
    app.input.process_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_n, mod=0))

    assert app.session.generation == 1


def test_resize_is_remembered(app):
    app.resize(1336, 800)

    assert app.session.scale == pytest.approx(2.0)
    assert config.load_user_settings()["window_size"] == [1336, 800]
