import pytest

from gorillas_game.core.city import CitySettings
from gorillas_game.core.game import Game
from gorillas_game.core.session import GameSession


@pytest.fixture
def flat_settings() -> CitySettings:
    """Provide a deterministic skyline of identical buildings.

    Every building is 80 wide and 40 tall, so building ``i`` spans
    ``[84 * i, 84 * i + 80]``. Player 1 stands at x=124, player 2 at x=544,
    and the whole city is 668 units wide.
    """

    return CitySettings(
        min_width=80.0,
        max_width=80.0,
        min_height=40.0,
        max_height=40.0,
        platform_min_height=40.0,
        platform_max_height=40.0,
        seed=1234,
    )


@pytest.fixture
def flat_game(flat_settings: CitySettings) -> Game:
    return Game(flat_settings)


@pytest.fixture
def session(flat_settings: CitySettings) -> GameSession:
    # viewport width equal to the city width keeps the scale at 1.0
    return GameSession(flat_settings, viewport=(668, 400))
