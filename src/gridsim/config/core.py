"""Core configuration management."""

from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union
import yaml
from omegaconf import DictConfig, OmegaConf

from .schemas import (
    ModelConfig,
    SimulationConfig,
    VisualizationConfig,
    TimeConfig,
)

_SECTIONS = {"model", "simulation", "visualization"}


class Config:
    """Main configuration container for gridsim runs."""

    def __init__(
        self,
        model: ModelConfig,
        simulation: SimulationConfig,
        visualization: Optional[VisualizationConfig] = None,
        output_dir: str = "./outputs",
        **kwargs,
    ):
        self.model = model
        self.simulation = simulation
        self.visualization = visualization
        self.output_dir = Path(output_dir)

        # Store any additional configuration
        for key, value in kwargs.items():
            setattr(self, key, value)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        config_dict = dict(config_dict or {})
        model = ModelConfig(**config_dict.get("model", {}))

        # Nested time section must become a TimeConfig
        sim_dict = dict(config_dict.get("simulation", {}))
        if "time" in sim_dict and isinstance(sim_dict["time"], dict):
            sim_dict["time"] = TimeConfig(**sim_dict["time"])
        simulation = SimulationConfig(**sim_dict)

        # Optional sections
        visualization = None
        if config_dict.get("visualization") is not None:
            visualization = VisualizationConfig(**config_dict["visualization"])

        other_keys = {k: v for k, v in config_dict.items() if k not in _SECTIONS}

        return cls(
            model=model,
            simulation=simulation,
            visualization=visualization,
            **other_keys,
        )

    @classmethod
    def from_hydra_config(cls, hydra_config: DictConfig) -> "Config":
        """Create Config from Hydra DictConfig."""
        return cls.from_dict(OmegaConf.to_container(hydra_config, resolve=True))

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        result = {}

        if self.model:
            result["model"] = self.model.to_dict()
        if self.simulation:
            result["simulation"] = self.simulation.to_dict()
        if self.visualization:
            result["visualization"] = self.visualization.to_dict()

        # Add other attributes
        for key, value in self.__dict__.items():
            if key not in _SECTIONS:
                if isinstance(value, Path):
                    result[key] = str(value)
                else:
                    result[key] = value

        return result


def apply_overrides(config_dict: Dict[str, Any], overrides: Sequence[str]) -> Dict[str, Any]:
    """
    Merge dotted ``key=value`` overrides into a configuration dictionary.

    Example:
        >>> apply_overrides({"simulation": {"time": {"dt": 0.1}}}, ["simulation.time.dt=0.05"])
        {'simulation': {'time': {'dt': 0.05}}}
    """
    if not overrides:
        return config_dict
    merged = OmegaConf.merge(
        OmegaConf.create(config_dict or {}), OmegaConf.from_dotlist(list(overrides))
    )
    return OmegaConf.to_container(merged, resolve=True)


def load_config(
    config_path: Union[str, Path], overrides: Optional[Sequence[str]] = None
) -> Config:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config_dict = yaml.safe_load(f) or {}

    return Config.from_dict(apply_overrides(config_dict, overrides or []))


def save_config(config: Config, save_path: Union[str, Path]) -> None:
    """Save configuration to YAML file."""
    save_path = Path(save_path)
    save_path.parent.mkdir(parents=True, exist_ok=True)

    with open(save_path, "w") as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, indent=2)
