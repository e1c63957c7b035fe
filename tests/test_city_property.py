from __future__ import annotations

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from gorillas_game.core.city import City, CitySettings


@pytest.mark.property
@settings(max_examples=50, deadline=None)
@given(
    building_count=st.integers(min_value=1, max_value=24),
    min_width=st.floats(min_value=1.0, max_value=150.0),
    width_span=st.floats(min_value=0.0, max_value=80.0),
    gap=st.floats(min_value=0.0, max_value=12.0),
    seed=st.integers(min_value=0, max_value=5_000),
)
def test_buildings_never_overlap(
    building_count: int,
    min_width: float,
    width_span: float,
    gap: float,
    seed: int,
) -> None:
    """Generated skylines are ordered, non-overlapping and evenly gapped."""

    city = City(
        CitySettings(
            building_count=building_count,
            min_width=min_width,
            max_width=min_width + width_span,
            gap=gap,
            seed=seed,
        )
    )

    buildings = city.buildings
    assert len(buildings) == building_count
    assert buildings[0].x == 0.0
    for previous, building in zip(buildings, buildings[1:]):
        assert building.x > previous.x
        assert building.x >= previous.right
        assert building.x - previous.right == pytest.approx(gap, abs=1e-6)
    assert city.total_width >= sum(b.width for b in buildings)
