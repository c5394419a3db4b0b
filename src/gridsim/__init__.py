"""
gridsim: fixed-step trajectory simulation on a uniform time grid.

A model's derivative function is integrated with a fixed-step Runge-Kutta
stepper (diffrax) and the trajectory is returned as a dense table whose first
column is time and whose remaining columns are the state components.

Example:
    >>> import gridsim as gs
    >>>
    >>> # Plain arrays in, matrix out
    >>> out = gs.sim([1.0, 0.0], [0.0, 1.0], {"omega": 1.0}, 0.5)
    >>>
    >>> # Or drive it from a configuration file
    >>> config = gs.load_config("configs/harmonic_oscillator.yaml")
    >>> system = gs.create_system(config.model)
    >>> simulator = gs.create_simulator(system, config.simulation)
    >>> table = simulator.run()
    >>> table.save("outputs/trajectory.csv")
"""

__version__ = "0.1.0"

import jax

# States are stepped in double precision; must be set before any array exists
jax.config.update("jax_enable_x64", True)

from .binding import sim
from .config import Config, load_config, save_config
from .dynamics import DynamicalSystem, create_system, register_system
from .errors import (
    GridSimError,
    ParameterError,
    StateShapeError,
    TimeSpanError,
    TruncatedTrajectoryError,
    TruncatedTrajectoryWarning,
)
from .integrators import RK4, create_stepper, integrate_const
from .parameters import FieldResult, ParameterBundle
from .simulation import (
    GridSimulator,
    ResultTable,
    Simulator,
    Trajectory,
    TrajectoryCollector,
    compute_grid,
    create_simulator,
)
from .workflow import run_simulation, run_simulation_from_config_file

__all__ = [
    # Core entry points
    "sim",
    "GridSimulator",
    "compute_grid",
    "run_simulation",
    "run_simulation_from_config_file",
    # Configuration
    "Config",
    "load_config",
    "save_config",
    # Models and steppers
    "DynamicalSystem",
    "create_system",
    "register_system",
    "RK4",
    "create_stepper",
    "integrate_const",
    "Simulator",
    "create_simulator",
    # Data
    "FieldResult",
    "ParameterBundle",
    "ResultTable",
    "Trajectory",
    "TrajectoryCollector",
    # Errors
    "GridSimError",
    "ParameterError",
    "StateShapeError",
    "TimeSpanError",
    "TruncatedTrajectoryError",
    "TruncatedTrajectoryWarning",
]
