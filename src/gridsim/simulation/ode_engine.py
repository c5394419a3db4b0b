"""Fixed-step ODE simulation engine backed by diffrax steppers."""

from .base import Simulator
from .grid import GridSimulator
from .result import ResultTable
from ..config.schemas import SimulationConfig
from ..dynamics.base import DynamicalSystem


class ODESimulator(Simulator):
    """Runs a system's initial state and parameters through a GridSimulator."""

    def __init__(
        self, system: DynamicalSystem, config: SimulationConfig, verbose: bool = False
    ):
        super().__init__(system, config)
        self.verbose = verbose

    def run(self) -> ResultTable:
        """
        Run the ODE simulation.

        Returns:
            ResultTable of shape (n_steps, n_comp + 1)
        """
        time = self.config.time
        if self.verbose:
            print(f"Running fixed-step simulation with {self.config.stepper}")
            print(f"Time: {time.t0} to {time.t1}, dt={time.dt}")

        simulator = GridSimulator.from_system(
            self.system,
            stepper=self.config.stepper,
            method_field=self.config.method_field,
            strict=self.config.strict,
        )
        table = simulator.run(
            self.system.return_state(),
            (time.t0, time.t1),
            self.system.parameters,
            time.dt,
        )
        table.metadata["model"] = self.system.__class__.__name__

        # Store results
        self.results = table

        return table
