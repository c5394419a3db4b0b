"""Factory functions for creating simulators."""

from .base import Simulator
from .ode_engine import ODESimulator
from ..config.schemas import SimulationConfig
from ..dynamics.base import DynamicalSystem
from ..integrators import create_stepper


def create_simulator(
    system: DynamicalSystem, config: SimulationConfig, verbose: bool = False
) -> Simulator:
    """
    Create a simulator from configuration.

    Every registered stepper is fixed-step, so all of them run on the
    :class:`ODESimulator` engine.

    Args:
        system: Dynamical system to simulate
        config: Simulation configuration
        verbose: Whether the simulator prints progress

    Returns:
        Configured simulator

    Raises:
        ValueError: If the stepper is not recognized
    """
    create_stepper(config.stepper)
    return ODESimulator(system, config, verbose=verbose)
