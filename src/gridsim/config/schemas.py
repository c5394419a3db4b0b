"""Configuration schemas for gridsim."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ModelConfig:
    """Configuration for the simulated model."""

    type: str = "harmonic_oscillator"
    """Registered model name (e.g., 'harmonic_oscillator', 'one_compartment')"""

    parameters: Dict[str, Any] = field(default_factory=dict)
    """Parameter bundle forwarded to the derivative function"""

    initial_state: Optional[List[float]] = None
    """Initial state (defaults to the model's own initial state)"""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "type": self.type,
            "parameters": self.parameters,
            "initial_state": self.initial_state,
        }


@dataclass
class TimeConfig:
    """Time configuration for simulation."""

    t0: float = 0.0
    """Start time"""

    t1: float = 10.0
    """Requested end time (the grid may overshoot it by less than one step)"""

    dt: float = 0.01
    """Fixed step size"""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"t0": self.t0, "t1": self.t1, "dt": self.dt}


@dataclass
class SimulationConfig:
    """Configuration for simulation."""

    stepper: str = "rk4"
    """Fixed-step stepper ('rk4', 'euler', 'heun', 'midpoint', 'ralston')"""

    time: TimeConfig = field(default_factory=TimeConfig)
    """Time configuration"""

    method_field: Optional[str] = None
    """Name of a string field that must be present in the parameter bundle"""

    strict: bool = False
    """Raise instead of zero-filling when the integrator returns too few points"""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "stepper": self.stepper,
            "time": self.time.to_dict(),
            "method_field": self.method_field,
            "strict": self.strict,
        }


@dataclass
class VisualizationConfig:
    """Configuration for visualization."""

    enabled: bool = True
    """Whether to plot the trajectory"""

    save_path: Optional[str] = "trajectory.png"
    """File name of the figure, relative to the output directory"""

    components: Optional[List[str]] = None
    """Components to plot (defaults to all)"""

    title: Optional[str] = None
    """Figure title"""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "enabled": self.enabled,
            "save_path": self.save_path,
            "components": self.components,
            "title": self.title,
        }
