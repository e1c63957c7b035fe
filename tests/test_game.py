import pytest

from gorillas_game.core.bomb import ThrowSettings, Velocity
from gorillas_game.core.city import CitySettings
from gorillas_game.core.game import FLYING, HIT, MISS, Game

CITY_WIDTH = 668.0


def test_bomb_starts_in_the_throwing_hand(flat_game: Game):
    flat_game.place_bomb(1)
    assert (flat_game.bomb.x, flat_game.bomb.y) == (96.0, 147.0)

    flat_game.place_bomb(2)
    assert (flat_game.bomb.x, flat_game.bomb.y) == (572.0, 147.0)


def test_match_needs_two_distinct_platforms():
    with pytest.raises(ValueError):
        Game(CitySettings(building_count=3, seed=1))


@pytest.mark.parametrize("position", [(-1.0, 200.0), (CITY_WIDTH + 1.0, 200.0), (300.0, -0.5)])
def test_leaving_the_screen_is_a_miss(flat_game: Game, position):
    flat_game.bomb.x, flat_game.bomb.y = position

    result = flat_game.check_substep(1, CITY_WIDTH)

    assert result.outcome == MISS
    assert result.reason == "off_screen"
    assert len(flat_game.blast_holes) == 0


def test_top_of_screen_is_open(flat_game: Game):
    flat_game.bomb.x, flat_game.bomb.y = 300.0, 10_000.0

    assert flat_game.check_frame_hit(CITY_WIDTH) is False


def test_off_screen_check_takes_priority_over_buildings(flat_game: Game):
    # x=-1 overlaps building 0 through the impact margin
    flat_game.bomb.x, flat_game.bomb.y = -1.0, 10.0

    result = flat_game.check_substep(1, CITY_WIDTH)

    assert result.reason == "off_screen"
    assert len(flat_game.blast_holes) == 0


def test_building_impact_carves_a_crater(flat_game: Game):
    flat_game.bomb.x, flat_game.bomb.y = 300.0, 30.0

    result = flat_game.check_substep(1, CITY_WIDTH)

    assert result.outcome == MISS
    assert result.reason == "building"
    assert result.blast_hole is not None
    assert (result.blast_hole.x, result.blast_hole.y) == (300.0, 30.0)
    assert len(flat_game.blast_holes) == 1


def test_impact_margin_reaches_above_the_roof(flat_game: Game):
    flat_game.bomb.x, flat_game.bomb.y = 300.0, 43.9
    assert flat_game.check_building_hit() is not None

    flat_game.impact_margin = 1.0
    flat_game.bomb.x, flat_game.bomb.y = 400.0, 43.9
    assert flat_game.check_building_hit() is None


def test_crater_is_open_space_without_duplicates(flat_game: Game):
    flat_game.blast_holes.record(300.0, 30.0)
    flat_game.bomb.x, flat_game.bomb.y = 305.0, 25.0

    result = flat_game.check_substep(1, CITY_WIDTH)

    assert result.outcome == FLYING
    assert len(flat_game.blast_holes) == 1


def test_bomb_falls_through_crater_until_solid_building(flat_game: Game):
    flat_game.blast_holes.record(300.0, 30.0)
    bomb = flat_game.bomb
    bomb.x, bomb.y = 300.0, 50.0
    bomb.velocity = Velocity(0.0, -10.0)

    result = None
    for _ in range(20):
        result = flat_game.step_bomb(200.0, 1, CITY_WIDTH)
        if result.finished:
            break

    assert result is not None and result.reason == "building"
    holes = list(flat_game.blast_holes)
    assert len(holes) == 2
    assert holes[1].x == pytest.approx(300.0)
    assert 0.0 <= holes[1].y <= 12.0


def test_step_stops_at_first_resolving_substep(flat_game: Game):
    bomb = flat_game.bomb
    bomb.x, bomb.y = 300.0, 45.0

    result = flat_game.step_bomb(200.0, 1, CITY_WIDTH)

    assert result.outcome == MISS
    assert result.substeps == 3
    assert len(result.path) == 3
    assert bomb.y == pytest.approx(43.8)


def test_defending_gorilla_hit(flat_game: Game):
    flat_game.bomb.x, flat_game.bomb.y = 544.0, 80.0

    result = flat_game.check_substep(1, CITY_WIDTH)

    assert result.outcome == HIT
    assert result.body_part == "body"
    assert result.hit_gorilla is flat_game.gorilla(2)


def test_thrower_cannot_hit_itself(flat_game: Game):
    flat_game.bomb.x, flat_game.bomb.y = 544.0, 80.0

    assert flat_game.check_substep(2, CITY_WIDTH).outcome == FLYING


def test_substeps_prevent_tunnelling(flat_settings):
    def throw(substeps: int):
        game = Game(flat_settings, throw_settings=ThrowSettings(gravity=0.0, substeps=substeps))
        game.bomb.x, game.bomb.y = 470.0, 80.0
        game.bomb.velocity = Velocity(1000.0, 0.0)
        return game.step_bomb(32.0, 1, CITY_WIDTH)

    assert throw(1).outcome == FLYING
    assert throw(10).outcome == HIT
