from dataclasses import dataclass
from typing import Iterator, Tuple

# Eight neighbours
NEIGHBOUR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),  # NW
    (-1, 0),  # N
    (-1, 1),  # NE
    (0, -1),  # W
    (0, 1),  # E
    (1, -1),  # SW
    (1, 0),  # S
    (1, 1),  # SE
)


@dataclass(frozen=True, order=True)
class Coordinate:
    """Position of a single cell on the unbounded grid."""

    row: int
    col: int

    def move(self, d_row: int, d_col: int) -> "Coordinate":
        return Coordinate(self.row + d_row, self.col + d_col)

    def neighbors(self) -> Iterator["Coordinate"]:
        for d_row, d_col in NEIGHBOUR_OFFSETS:
            yield self.move(d_row, d_col)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)
