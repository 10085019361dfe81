import logging
from typing import FrozenSet, Iterable, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from sparse_life.utils.measure_time import timing_decorator
from .ca_state import CAState
from .coordinate import Coordinate
from .errors import InvalidSeed

# The value marking a live cell in a seed matrix
LIVE_CELL_VAL = 1

Seed = Union[Sequence[Sequence[int]], NDArray[np.int_]]


def next_state(state: CAState, live_neighbors: int) -> CAState:
    """
    Apply Conway's rule to a single cell.

    - Any live cell with fewer than two live neighbours dies (under-population).
    - Any live cell with two or three live neighbours lives on.
    - Any live cell with more than three live neighbours dies (over-population).
    - Any dead cell with exactly three live neighbours becomes alive (reproduction).
    """
    if state == CAState.ALIVE:
        if live_neighbors < 2 or live_neighbors > 3:
            return CAState.DEAD
        return CAState.ALIVE
    if live_neighbors == 3:
        return CAState.ALIVE
    return CAState.DEAD


def count_live_neighbors(cell: Coordinate, generation: FrozenSet[Coordinate]) -> int:
    return sum(1 for neighbor in cell.neighbors() if neighbor in generation)


def _seed_to_grid(seed: Seed) -> NDArray:
    if seed is None:
        raise InvalidSeed("seed is missing")

    if isinstance(seed, np.ndarray):
        grid = seed
    else:
        rows = list(seed)
        if not rows:
            raise InvalidSeed("seed has no rows")
        try:
            widths = {len(row) for row in rows}
        except TypeError as e:
            raise InvalidSeed("seed must be a two-dimensional matrix") from e
        if len(widths) > 1:
            raise InvalidSeed(f"seed rows have different lengths: {sorted(widths)}")
        grid = np.array(rows)

    if grid.ndim != 2:
        raise InvalidSeed(
            f"seed must be a two-dimensional matrix, got {grid.ndim} dimension(s)"
        )
    vertical, horizontal = grid.shape
    if vertical < 1:
        raise InvalidSeed("seed has no rows")
    if horizontal < 1:
        raise InvalidSeed("seed rows have no columns")
    return grid


def _extent(values: Iterable[int]) -> int:
    values = list(values)
    return max(max(values), 0) - min(min(values), 0) + 1


def _as_coordinate(cell: Union[Coordinate, Tuple[int, int]]) -> Coordinate:
    if isinstance(cell, Coordinate):
        return cell
    try:
        row, col = cell
        return Coordinate(int(row), int(col))
    except (TypeError, ValueError) as e:
        raise InvalidSeed(f"not a (row, col) pair: {cell!r}") from e


class SimulationEngine:
    """
    Conway's Game of Life on an unbounded grid.

    Only live cells are stored. Each call to :meth:`advance` reads the current
    generation in full and swaps in a freshly built one, so the old generation
    is never modified while the next one is computed.
    """

    def __init__(self, seed: Seed):
        grid = _seed_to_grid(seed)
        live_cells = frozenset(
            Coordinate(int(i), int(j)) for i, j in np.argwhere(grid == LIVE_CELL_VAL)
        )
        rows, cols = grid.shape
        self._init_state(live_cells, int(rows), int(cols))

    @classmethod
    def from_coordinates(
        cls,
        cells: Iterable[Union[Coordinate, Tuple[int, int]]],
        rows: int | None = None,
        cols: int | None = None,
    ) -> "SimulationEngine":
        """
        Build an engine from explicit live coordinates.

        When ``rows``/``cols`` are omitted they default to the height and
        width of the box spanning the origin and every live cell. An empty
        seed needs explicit dimensions.
        """
        if cells is None:
            raise InvalidSeed("seed is missing")
        live_cells = frozenset(_as_coordinate(cell) for cell in cells)

        if not live_cells and (rows is None or cols is None):
            raise InvalidSeed("seed has no live cells and no dimensions")
        if rows is None:
            rows = _extent(cell.row for cell in live_cells)
        if cols is None:
            cols = _extent(cell.col for cell in live_cells)
        if rows < 1 or cols < 1:
            raise InvalidSeed(f"seed dimensions must be positive, got {rows}x{cols}")

        engine = cls.__new__(cls)
        engine._init_state(live_cells, rows, cols)
        return engine

    def _init_state(
        self, live_cells: FrozenSet[Coordinate], rows: int, cols: int
    ) -> None:
        self._current_generation = live_cells
        self._rows = rows
        self._cols = cols
        self._generation = 0
        logging.info(
            "Initializing engine with %dx%d seed, population=%d",
            rows,
            cols,
            len(live_cells),
        )

    @timing_decorator
    def advance(self) -> None:
        """Transition to the next generation."""
        current = self._current_generation

        # Cells further away than one step from a live cell stay dead
        candidates = set(current)
        for cell in current:
            candidates.update(cell.neighbors())

        next_generation = set()
        for cell in candidates:
            state = CAState.ALIVE if cell in current else CAState.DEAD
            live_neighbors = count_live_neighbors(cell, current)
            if next_state(state, live_neighbors) == CAState.ALIVE:
                next_generation.add(cell)

        # Swap the next generation to the current generation
        self._current_generation = frozenset(next_generation)
        self._generation += 1
        logging.debug(
            "generation %d: population=%d", self._generation, len(next_generation)
        )

    def live_cells(self) -> FrozenSet[Coordinate]:
        return self._current_generation

    def dimensions(self) -> Tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def population(self) -> int:
        return len(self._current_generation)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(rows={self._rows}, cols={self._cols}, "
            f"generation={self._generation}, population={self.population})"
        )
