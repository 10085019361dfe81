from pathlib import Path
from typing import Iterable, List

from .errors import InvalidSeed


def parse_seed(lines: Iterable[str]) -> List[List[int]]:
    """
    Turn rows of ``0``/``1`` digits into a seed matrix.

    Blank lines are skipped; any character other than ``0`` or ``1`` makes
    the seed invalid.
    """
    grid = []
    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        if set(line) - {"0", "1"}:
            raise InvalidSeed(f"line {line_number}: expected only 0/1, got {line!r}")
        grid.append([int(c) for c in line])
    return grid


def load_seed_file(file_path: str | Path) -> List[List[int]]:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed file not found: {path}")

    with open(path, "r") as f:
        grid = parse_seed(f)
    if not grid:
        raise InvalidSeed(f"Seed file is empty: {path}")
    return grid
