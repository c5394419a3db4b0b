"""Simulation module for running models on a uniform time grid."""

from .base import Simulator
from .collector import Trajectory, TrajectoryCollector
from .factory import create_simulator
from .grid import GridSimulator, compute_grid
from .ode_engine import ODESimulator
from .result import ResultTable

__all__ = [
    "GridSimulator",
    "ODESimulator",
    "ResultTable",
    "Simulator",
    "Trajectory",
    "TrajectoryCollector",
    "compute_grid",
    "create_simulator",
]
