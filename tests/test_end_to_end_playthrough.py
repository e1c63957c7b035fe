import copy
import logging

import pytest

from gorillas_game.core.session import AIMING, CELEBRATING, GameSession

logger = logging.getLogger("gorillas.e2e")


def _simulate(session: GameSession, dx: float, dy: float, max_ticks: int = 400) -> GameSession:
    """Play one throw to completion, 16 ms per animation tick."""

    session.begin_aim()
    session.update_aim_vector(dx, dy)
    session.release_aim()
    for _ in range(max_ticks):
        if session.advance(16.0).finished:
            break
    return session


def _search_winning_drag(session: GameSession):
    speed = 40.0
    while speed <= 110.0:
        trial = _simulate(copy.deepcopy(session), speed, speed)
        if trial.phase == CELEBRATING:
            return speed
        speed += 0.5
    return None


def test_two_turn_match(session: GameSession, caplog):
    caplog.set_level(logging.INFO)

    # player 1 lets go without dragging and the bomb drops onto its own roof
    _simulate(session, 0.0, 0.0)
    logger.info("Turn 1 over: %s", session.message)
    assert session.phase == AIMING
    assert session.current_player == 2
    assert len(session.city.blast_holes) == 1

    speed = _search_winning_drag(session)
    logger.info("Player 2 wins with drag (%s, %s)", speed, speed)
    assert speed is not None

    _simulate(session, speed, speed)

    state = session.get_render_state()
    assert state.phase == CELEBRATING
    assert state.winner == 2
    assert state.message == "Player 2 wins!"
    assert len(state.blast_holes) == 1
    assert "wins with a hit" in caplog.text


@pytest.mark.parametrize("seed", [3, 11, 29])
def test_random_cities_always_resolve_throws(seed):
    session = GameSession(seed=seed)
    for _ in range(6):
        if session.phase != AIMING:
            break
        thrower = session.current_player
        _simulate(session, -60.0 if thrower == 1 else 60.0, 60.0, max_ticks=2000)
        assert session.phase in (AIMING, CELEBRATING)
