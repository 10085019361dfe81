from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config_reader import ConfigurationReader
from .types import LogLevel


class RenderConfig(BaseModel):
    """Glyphs used to print a generation."""

    live_glyph: str = Field(default="◾", alias="liveGlyph", min_length=1, max_length=1)
    dead_glyph: str = Field(default="◽", alias="deadGlyph", min_length=1, max_length=1)

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    log_file: Optional[str] = Field(default="log.dat", alias="logFile")
    level: LogLevel = LogLevel.INFO

    model_config = ConfigDict(populate_by_name=True)


class SimulationConfig(BaseModel):
    """Root configuration model for a simulation run."""

    pattern: str = "glider_gun"
    seed_file: Optional[Path] = Field(default=None, alias="seedFile")
    delay: float = Field(default=0.1, ge=0)  # seconds between generations
    max_generations: Optional[int] = Field(default=None, alias="maxGenerations", gt=0)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v):
        if not v.strip():
            raise ValueError("Pattern name must not be empty")
        return v


def load_simulation_config(path: str | Path) -> SimulationConfig:
    return ConfigurationReader[SimulationConfig](path, SimulationConfig).load_config()
