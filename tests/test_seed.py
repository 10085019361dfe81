import pytest

from sparse_life.simulator import InvalidSeed
from sparse_life.simulator.seed import load_seed_file, parse_seed


def test_parse_seed_skips_blank_lines():
    assert parse_seed(["010\n", "\n", "  001  \n", "111"]) == [
        [0, 1, 0],
        [0, 0, 1],
        [1, 1, 1],
    ]


def test_parse_seed_rejects_other_characters():
    with pytest.raises(InvalidSeed, match="line 2"):
        parse_seed(["010", "0x0"])


def test_load_seed_file(tmp_path):
    path = tmp_path / "blinker.txt"
    path.write_text("000\n111\n000\n")
    assert load_seed_file(path) == [[0, 0, 0], [1, 1, 1], [0, 0, 0]]


def test_load_seed_file_accepts_str_path(tmp_path):
    path = tmp_path / "cell.txt"
    path.write_text("1\n")
    assert load_seed_file(str(path)) == [[1]]


def test_load_missing_seed_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_seed_file(tmp_path / "missing.txt")


def test_load_empty_seed_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("\n\n")
    with pytest.raises(InvalidSeed, match="empty"):
        load_seed_file(path)
