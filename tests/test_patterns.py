import pytest

from sparse_life.simulator import SimulationEngine
from sparse_life.simulator.patterns import GLIDER_GUN, PATTERNS, get_pattern


@pytest.mark.parametrize("name", sorted(PATTERNS))
def test_patterns_are_valid_seeds(name):
    engine = SimulationEngine(get_pattern(name))
    assert engine.population > 0


def test_glider_gun_shape():
    assert len(GLIDER_GUN) == 20
    assert {len(row) for row in GLIDER_GUN} == {38}


def test_get_pattern_returns_a_copy():
    pattern = get_pattern("block")
    pattern[0][0] = 1
    assert get_pattern("block")[0][0] == 0


def test_unknown_pattern():
    with pytest.raises(KeyError, match="glider_gun"):
        get_pattern("spaceship")
