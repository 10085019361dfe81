from .simulator import Coordinate, InvalidSeed, SimulationEngine

__version__ = "0.1.0"

__all__ = ["Coordinate", "InvalidSeed", "SimulationEngine"]
