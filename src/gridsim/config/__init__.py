"""Configuration management for gridsim."""

from .core import Config, apply_overrides, load_config, save_config
from .schemas import (
    ModelConfig,
    SimulationConfig,
    TimeConfig,
    VisualizationConfig,
)

__all__ = [
    "Config",
    "apply_overrides",
    "load_config",
    "save_config",
    "ModelConfig",
    "SimulationConfig",
    "TimeConfig",
    "VisualizationConfig",
]
