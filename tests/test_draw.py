import numpy as np

from sparse_life.simulator import Coordinate, SimulationEngine
from sparse_life.simulator.draw import count_outside, render, render_engine, to_matrix


def test_to_matrix_clips_to_viewport():
    live = {Coordinate(0, 1), Coordinate(2, 2), Coordinate(-1, 0), Coordinate(1, 5)}
    viewport = to_matrix(live, 3, 3)
    assert viewport.dtype == np.int8
    assert viewport.tolist() == [
        [0, 1, 0],
        [0, 0, 0],
        [0, 0, 1],
    ]


def test_render_default_glyphs():
    live = {Coordinate(0, 0), Coordinate(1, 1)}
    assert render(live, 2, 3) == "◾◽◽\n◽◾◽\n"


def test_render_custom_glyphs():
    live = {Coordinate(0, 2)}
    assert render(live, 1, 3, live_glyph="#", dead_glyph=".") == "..#\n"


def test_render_engine_uses_seed_dimensions():
    engine = SimulationEngine([[0, 0, 0], [1, 1, 1], [0, 0, 0]])
    engine.advance()
    assert render_engine(engine, live_glyph="O", dead_glyph=".") == ".O.\n.O.\n.O.\n"


def test_count_outside():
    live = {Coordinate(0, 0), Coordinate(-1, 0), Coordinate(0, 3), Coordinate(2, 2)}
    assert count_outside(live, 3, 3) == 2
