from typing import Iterable

import numpy as np
from numpy.typing import NDArray

from .coordinate import Coordinate
from .simulation_engine import SimulationEngine

# Black square for a live cell, white square for a dead one
LIVE_GLYPH = "◾"
DEAD_GLYPH = "◽"


def to_matrix(live_cells: Iterable[Coordinate], rows: int, cols: int) -> NDArray[np.int8]:
    """
    Project live cells onto a fixed ``rows x cols`` viewport anchored at (0, 0).

    Cells outside the viewport are clipped.
    """
    viewport = np.zeros((rows, cols), dtype=np.int8)
    for cell in live_cells:
        if 0 <= cell.row < rows and 0 <= cell.col < cols:
            viewport[cell.row, cell.col] = 1
    return viewport


def render(
    live_cells: Iterable[Coordinate],
    rows: int,
    cols: int,
    live_glyph: str = LIVE_GLYPH,
    dead_glyph: str = DEAD_GLYPH,
) -> str:
    viewport = to_matrix(live_cells, rows, cols)
    glyphs = np.where(viewport == 1, live_glyph, dead_glyph)
    return "".join("".join(row) + "\n" for row in glyphs)


def count_outside(live_cells: Iterable[Coordinate], rows: int, cols: int) -> int:
    return sum(
        1
        for cell in live_cells
        if not (0 <= cell.row < rows and 0 <= cell.col < cols)
    )


def render_engine(
    engine: SimulationEngine,
    live_glyph: str = LIVE_GLYPH,
    dead_glyph: str = DEAD_GLYPH,
) -> str:
    rows, cols = engine.dimensions()
    return render(engine.live_cells(), rows, cols, live_glyph, dead_glyph)
