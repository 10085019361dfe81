from .ca_state import CAState
from .coordinate import Coordinate
from .errors import InvalidSeed
from .simulation_engine import SimulationEngine, next_state
from .patterns import PATTERNS, get_pattern
from .seed import load_seed_file

__all__ = [
    "CAState",
    "Coordinate",
    "InvalidSeed",
    "SimulationEngine",
    "next_state",
    "PATTERNS",
    "get_pattern",
    "load_seed_file",
]
