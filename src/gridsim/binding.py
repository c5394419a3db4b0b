"""Host-facing entry point working on plain arrays and mappings.

Example:
    >>> import gridsim
    >>> out = gridsim.sim([1.0, 0.0], [0.0, 1.0], {"omega": 2.0}, 0.5)
    >>> out.shape
    (3, 3)
"""

from typing import Any, Mapping, Optional, Union

import numpy as np

from .dynamics import DynamicalSystem, create_system
from .simulation.grid import GridSimulator


def _resolve_model(model: Union[str, DynamicalSystem]) -> DynamicalSystem:
    if isinstance(model, DynamicalSystem):
        return model
    return create_system(model)


def sim(
    a_init,
    times,
    par: Optional[Mapping[str, Any]],
    step_size: float,
    model: Union[str, DynamicalSystem] = "harmonic_oscillator",
    stepper: str = "rk4",
    method_field: Optional[str] = None,
    strict: bool = False,
) -> np.ndarray:
    """
    Simulate ``model`` on a uniform grid and return the result matrix.

    Args:
        a_init: Initial state, any array-like of length ``n_comp``
        times: Two-element array-like ``(t_start, t_end)``
        par: Parameter mapping forwarded to the model's derivative function
        step_size: Fixed step
        model: Registered model name or a DynamicalSystem instance
        stepper: Registered stepper name
        method_field: Name of a string field ``par`` must carry
        strict: Raise if the integrator returns fewer points than grid rows

    Returns:
        Array of shape ``(n_steps, n_comp + 1)``; column 0 is time
    """
    system = _resolve_model(model)
    simulator = GridSimulator.from_system(
        system, stepper=stepper, method_field=method_field, strict=strict
    )
    return simulator.run(a_init, times, par, step_size).to_numpy()
