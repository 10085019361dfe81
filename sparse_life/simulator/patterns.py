from typing import Dict, List

from .seed import parse_seed

# Gosper glider gun, the demo seed
GLIDER_GUN = parse_seed(
    """
    00000000000000000000000000000000000000
    00000000000000000000000001000000000000
    00000000000000000000000101000000000000
    00000000000001100000011000000000000110
    00000000000010001000011000000000000110
    01100000000100000100011000000000000000
    01100000000100010110000101000000000000
    00000000000100000100000001000000000000
    00000000000010001000000000000000000000
    00000000000001100000000000000000000000
    00000000000000000000000000000000000000
    00000000000000000000000000000000000000
    00000000000000000000000000000000000000
    00000000000000000000000000000000000000
    00000000000000000000000000000000000000
    00000000000000000000000000000000000000
    00000000000000000000000000000000000000
    00000000000000000000000000000000000000
    00000000000000000000000000000000000000
    00000000000000000000000000000000000000
    """.splitlines()
)

GLIDER = parse_seed(
    """
    010
    001
    111
    """.splitlines()
)

BLINKER = parse_seed(
    """
    000
    111
    000
    """.splitlines()
)

BLOCK = parse_seed(
    """
    0000
    0110
    0110
    0000
    """.splitlines()
)

PATTERNS: Dict[str, List[List[int]]] = {
    "glider_gun": GLIDER_GUN,
    "glider": GLIDER,
    "blinker": BLINKER,
    "block": BLOCK,
}


def get_pattern(name: str) -> List[List[int]]:
    try:
        pattern = PATTERNS[name]
    except KeyError:
        raise KeyError(
            f"Unknown pattern {name!r}, expected one of: {', '.join(sorted(PATTERNS))}"
        ) from None
    return [list(row) for row in pattern]
