import pytest

from sparse_life.simulator.coordinate import NEIGHBOUR_OFFSETS, Coordinate


def test_move_returns_offset_coordinate():
    origin = Coordinate(3, 4)
    assert origin.move(-5, 2) == Coordinate(-2, 6)
    assert origin == Coordinate(3, 4)


def test_value_equality_and_hash():
    assert Coordinate(1, 2) == Coordinate(1, 2)
    assert Coordinate(1, 2) != Coordinate(2, 1)
    assert len({Coordinate(1, 2), Coordinate(1, 2), Coordinate(2, 1)}) == 2


def test_ordering_is_row_major():
    cells = [Coordinate(1, 0), Coordinate(0, 5), Coordinate(0, -1)]
    assert sorted(cells) == [Coordinate(0, -1), Coordinate(0, 5), Coordinate(1, 0)]


def test_coordinate_is_immutable():
    cell = Coordinate(0, 0)
    with pytest.raises(AttributeError):
        cell.row = 1


def test_neighbors_are_the_eight_surrounding_cells():
    neighbors = list(Coordinate(0, 0).neighbors())
    assert len(neighbors) == 8
    assert set(neighbors) == {
        Coordinate(-1, -1),
        Coordinate(-1, 0),
        Coordinate(-1, 1),
        Coordinate(0, -1),
        Coordinate(0, 1),
        Coordinate(1, -1),
        Coordinate(1, 0),
        Coordinate(1, 1),
    }
    assert (0, 0) not in NEIGHBOUR_OFFSETS


def test_as_tuple():
    assert Coordinate(-7, 9).as_tuple() == (-7, 9)
