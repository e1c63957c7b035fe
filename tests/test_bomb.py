import pytest

from gorillas_game.core.bomb import Bomb, ThrowSettings, Velocity


def test_single_step_applies_gravity_before_moving():
    bomb = Bomb(x=0.0, y=0.0, velocity=Velocity(10.0, 0.0))

    bomb.move(200.0, -1, ThrowSettings())

    assert bomb.velocity.y == pytest.approx(-20.0)
    assert bomb.x == pytest.approx(10.0)
    assert bomb.y == pytest.approx(-20.0)
    assert bomb.rotation == pytest.approx(-5.0)


def test_spin_direction_only_changes_rotation():
    left = Bomb(velocity=Velocity(3.0, 4.0))
    right = Bomb(velocity=Velocity(3.0, 4.0))

    left.move(50.0, -1, ThrowSettings())
    right.move(50.0, 1, ThrowSettings())

    assert (left.x, left.y) == (right.x, right.y)
    assert left.rotation == pytest.approx(-right.rotation)


def test_reset_places_bomb_at_rest():
    bomb = Bomb(x=5.0, y=5.0, rotation=2.0, velocity=Velocity(7.0, -3.0))

    bomb.reset(96.0, 147.0)

    assert (bomb.x, bomb.y, bomb.rotation) == (96.0, 147.0, 0.0)
    assert (bomb.velocity.x, bomb.velocity.y) == (0.0, 0.0)


@pytest.mark.parametrize("overrides", [{"substeps": 0}, {"reference_interval": 0.0}])
def test_invalid_throw_settings(overrides):
    with pytest.raises(ValueError):
        ThrowSettings(**overrides)
