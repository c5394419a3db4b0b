"""Fixed-step steppers and the constant-step integration loop."""

from typing import Dict, Type

from diffrax import AbstractSolver, Euler, Heun, Midpoint, Ralston

from .integrate import integrate_const
from .rk4 import RK4


# Registry of available fixed-step steppers
STEPPER_REGISTRY: Dict[str, Type[AbstractSolver]] = {
    "rk4": RK4,
    "runge_kutta4": RK4,  # Alias
    "euler": Euler,
    "heun": Heun,
    "midpoint": Midpoint,
    "ralston": Ralston,
}


def create_stepper(name: str = "rk4") -> AbstractSolver:
    """
    Construct a fresh stepper instance by name.

    Raises:
        ValueError: If the stepper name is not recognized
    """
    key = name.lower()
    if key not in STEPPER_REGISTRY:
        available = list(STEPPER_REGISTRY.keys())
        raise ValueError(f"Unknown stepper: {name}. Available steppers: {available}")
    return STEPPER_REGISTRY[key]()


def list_available_steppers() -> Dict[str, Type[AbstractSolver]]:
    return STEPPER_REGISTRY.copy()


__all__ = [
    "RK4",
    "STEPPER_REGISTRY",
    "create_stepper",
    "integrate_const",
    "list_available_steppers",
]
