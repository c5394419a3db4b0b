"""Uniform-grid trajectory simulation on top of a fixed-step stepper."""

import math
import warnings
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, Union

import jax.numpy as jnp
import numpy as np

from ..errors import (
    StateShapeError,
    TimeSpanError,
    TruncatedTrajectoryError,
    TruncatedTrajectoryWarning,
)
from ..integrators import create_stepper, integrate_const
from ..parameters import ParameterBundle
from .collector import Trajectory, TrajectoryCollector
from .result import ResultTable

DerivativeFn = Callable[[float, jnp.ndarray, ParameterBundle], jnp.ndarray]


def compute_grid(t_start: float, t_end: float, step_size: float) -> Tuple[int, float]:
    """
    Number of grid points and the last grid time for a time span.

    ``n_steps = ceil((t_end - t_start) / step_size) + 1`` and the last grid
    time is ``t_start + (n_steps - 1) * step_size``, which may overshoot the
    requested ``t_end`` by less than one step.

    Raises:
        TimeSpanError: On a non-positive step or a reversed/non-finite span
    """
    t_start = float(t_start)
    t_end = float(t_end)
    step_size = float(step_size)

    if not (math.isfinite(t_start) and math.isfinite(t_end)):
        raise TimeSpanError(f"Time span must be finite, got ({t_start}, {t_end})")
    if not math.isfinite(step_size) or step_size <= 0.0:
        raise TimeSpanError(f"step_size must be positive, got {step_size}")
    if t_end < t_start:
        raise TimeSpanError(f"Time span is reversed: ({t_start}, {t_end})")

    n_steps = int(math.ceil((t_end - t_start) / step_size)) + 1
    return n_steps, t_start + (n_steps - 1) * step_size


def _unpack_time_span(time_span) -> Tuple[float, float]:
    values = np.asarray(time_span, dtype=float).reshape(-1)
    if values.shape[0] != 2:
        raise TimeSpanError(
            f"time_span must hold exactly two values, got {values.shape[0]}"
        )
    return float(values[0]), float(values[1])


class GridSimulator:
    """
    Simulate a model on a uniform time grid and return a dense table.

    Each :meth:`run` call builds its own stepper and trajectory collector, so
    an instance holds no state between calls.

    Args:
        derivative_fn: ``f(t, state, params)`` returning d(state)/dt
        n_comp: Number of state components
        stepper: Registered stepper name (see ``gridsim.integrators``)
        method_field: If set, name of a string field the parameter bundle
            must carry; its value is recorded in the table metadata
        strict: Raise :class:`TruncatedTrajectoryError` instead of
            zero-filling when the integrator returns too few points
        column_names: Names of the state components
        integrator: Constant-step integration routine
        verbose: Print a summary line per run
    """

    def __init__(
        self,
        derivative_fn: DerivativeFn,
        n_comp: int,
        stepper: str = "rk4",
        method_field: Optional[str] = None,
        strict: bool = False,
        column_names: Optional[Sequence[str]] = None,
        integrator: Callable[..., int] = integrate_const,
        verbose: bool = False,
    ):
        if n_comp < 1:
            raise ValueError(f"n_comp must be at least 1, got {n_comp}")
        if column_names is not None and len(column_names) != n_comp:
            raise ValueError(
                f"Expected {n_comp} column names, got {len(column_names)}"
            )
        # Fail on an unknown stepper name at construction time
        create_stepper(stepper)

        self.derivative_fn = derivative_fn
        self.n_comp = n_comp
        self.stepper = stepper
        self.method_field = method_field
        self.strict = strict
        self.column_names = tuple(column_names or (f"x{j}" for j in range(n_comp)))
        self.integrator = integrator
        self.verbose = verbose

    @classmethod
    def from_system(cls, system, **kwargs) -> "GridSimulator":
        """Build a simulator for a :class:`~gridsim.dynamics.DynamicalSystem`."""
        return cls(
            system.compute_derivatives,
            system.n_comp,
            column_names=system.get_column_names(),
            **kwargs,
        )

    def run(
        self,
        initial_state,
        time_span,
        parameters: Union[ParameterBundle, Mapping[str, Any], None],
        step_size: float,
    ) -> ResultTable:
        """
        Integrate from ``time_span[0]`` with a fixed step and tabulate the result.

        Args:
            initial_state: Sequence of exactly ``n_comp`` reals
            time_span: Pair ``(t_start, t_end)``
            parameters: Bundle forwarded unchanged to the derivative function
            step_size: Positive fixed step

        Returns:
            ResultTable with ``ceil((t_end - t_start) / step_size) + 1`` rows
        """
        bundle = ParameterBundle.coerce(parameters)
        metadata = {"stepper": self.stepper, "step_size": float(step_size)}
        if self.method_field is not None:
            metadata["method"] = bundle.get_str(self.method_field).unwrap()

        t_start, t_requested = _unpack_time_span(time_span)
        n_steps, t_end = compute_grid(t_start, t_requested, step_size)
        metadata.update(t_start=t_start, t_end=t_end, t_requested=t_requested)

        table = np.zeros((n_steps, self.n_comp + 1))
        state = self._initial_state(initial_state)

        trajectory = self._integrate(state, t_start, t_end, float(step_size), bundle)
        n_filled = self._fill(table, trajectory)

        if n_filled < n_steps:
            if self.strict:
                raise TruncatedTrajectoryError(n_steps, n_filled)
            warnings.warn(
                f"Integrator produced {n_filled} of {n_steps} grid points; "
                f"remaining rows are zero",
                TruncatedTrajectoryWarning,
                stacklevel=2,
            )

        if self.verbose:
            print(
                f"Simulated {n_filled}/{n_steps} grid points with {self.stepper}: "
                f"t={t_start} to {t_end}, dt={step_size}"
            )

        return ResultTable(
            data=table,
            n_filled=n_filled,
            column_names=("t",) + self.column_names,
            metadata=metadata,
        )

    def _initial_state(self, initial_state) -> jnp.ndarray:
        values = np.asarray(initial_state, dtype=float)
        if values.shape != (self.n_comp,):
            raise StateShapeError(
                f"Initial state must have shape ({self.n_comp},), got {values.shape}"
            )
        return jnp.asarray(values, dtype=jnp.float64)

    def _integrate(
        self,
        state: jnp.ndarray,
        t_start: float,
        t_end: float,
        step_size: float,
        bundle: ParameterBundle,
    ) -> Trajectory:
        def vector_field(t, y, args):
            return self.derivative_fn(t, y, bundle)

        collector = TrajectoryCollector(self.n_comp)
        self.integrator(
            create_stepper(self.stepper),
            vector_field,
            state,
            t_start,
            t_end,
            step_size,
            collector,
        )
        return collector.to_trajectory()

    def _fill(self, table: np.ndarray, trajectory: Trajectory) -> int:
        """Copy trajectory rows into ``table``; returns the number of rows written."""
        n_rows = min(table.shape[0], len(trajectory))
        if n_rows == 0:
            return 0
        if trajectory.states.shape[1] != self.n_comp:
            raise StateShapeError(
                f"Integrator returned states with {trajectory.states.shape[1]} "
                f"components, expected {self.n_comp}"
            )
        table[:n_rows, 0] = trajectory.times[:n_rows]
        table[:n_rows, 1:] = trajectory.states[:n_rows]
        return n_rows
