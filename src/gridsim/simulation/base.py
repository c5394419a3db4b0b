"""Base classes for simulation engines."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from ..config.schemas import SimulationConfig
from ..dynamics.base import DynamicalSystem
from .result import ResultTable


class Simulator(ABC):
    """Abstract base class for configuration-driven simulation engines."""

    def __init__(self, system: DynamicalSystem, config: SimulationConfig):
        self.system = system
        self.config = config
        self.results: Optional[ResultTable] = None

    @abstractmethod
    def run(self) -> ResultTable:
        """
        Run the simulation.

        Returns:
            ResultTable with a time column followed by the state components
        """
        pass

    def get_trajectory_info(self) -> Dict[str, Any]:
        """Summarize the last run with plain Python values (safe to dump as YAML)."""
        if self.results is None:
            return {"completed": False}

        table = self.results
        filled = table.times[: table.n_filled]
        return {
            "completed": True,
            "n_steps": table.n_steps,
            "n_filled": table.n_filled,
            "truncated": table.truncated,
            "time_span": [float(filled[0]), float(filled[-1])] if table.n_filled else [],
            "table_shape": list(table.data.shape),
        }
