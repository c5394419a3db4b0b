"""Constant-step integration with a per-grid-point observer."""

from typing import Any, Callable

import equinox as eqx
import jax.numpy as jnp
import numpy as np
from diffrax import AbstractSolver, ODETerm

_EPS = np.finfo(float).eps

Observer = Callable[[jnp.ndarray, float], None]


@eqx.filter_jit
def _step(stepper, term, t0, t1, y, args, solver_state):
    # Times arrive as arrays so one compilation serves every step of a run
    y1, _, _, solver_state, _ = stepper.step(
        term, t0, t1, y, args, solver_state, made_jump=False
    )
    return y1, solver_state


def _less_eq_with_sign(t1: float, t2: float, dt: float) -> bool:
    """``t1 <= t2`` up to machine epsilon, in the direction of ``dt``."""
    if dt > 0:
        return t1 - t2 <= _EPS
    return t2 - t1 <= _EPS


def integrate_const(
    stepper: AbstractSolver,
    derivative_fn: Callable[[float, jnp.ndarray, Any], jnp.ndarray],
    state,
    t_start: float,
    t_end: float,
    step_size: float,
    observer: Observer,
    args: Any = None,
) -> int:
    """
    Integrate ``derivative_fn`` from ``t_start`` to ``t_end`` with a fixed step.

    The observer is called with ``(state, t)`` at ``t_start`` and after every
    step. Grid times are computed as ``t_start + k * step_size`` rather than by
    repeated addition, and stepping stops once another full step would pass
    ``t_end`` (compared up to machine epsilon).

    Args:
        stepper: A diffrax solver used through its manual stepping API
        derivative_fn: Vector field ``f(t, y, args)``
        state: Initial state
        t_start: Start time
        t_end: End time
        step_size: Constant step, signed in the direction of integration
        observer: Callback receiving each accepted ``(state, t)``
        args: Passed through to ``derivative_fn``

    Returns:
        Number of observer calls
    """
    t_start = float(t_start)
    t_end = float(t_end)
    step_size = float(step_size)
    if step_size == 0.0:
        raise ValueError("step_size must be non-zero")

    term = ODETerm(derivative_fn)
    y = jnp.asarray(state)
    time = t_start
    step = 0

    solver_state = stepper.init(term, t_start, t_start + step_size, y, args)
    while _less_eq_with_sign(time + step_size, t_end, step_size):
        observer(y, time)
        y, solver_state = _step(
            stepper,
            term,
            jnp.asarray(time),
            jnp.asarray(time + step_size),
            y,
            args,
            solver_state,
        )
        step += 1
        time = t_start + step * step_size
    observer(y, time)

    return step + 1
