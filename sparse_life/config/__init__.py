from .simulation_config import (
    LoggingConfig,
    RenderConfig,
    SimulationConfig,
    load_simulation_config,
)
from .config_reader import ConfigurationReader
from .types import LogLevel
