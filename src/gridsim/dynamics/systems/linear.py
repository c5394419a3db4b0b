import jax.numpy as jnp
from ..base import DynamicalSystem
from ...parameters import ParameterBundle


class ExponentialDecay(DynamicalSystem):
    """dx/dt = -k x"""

    n_comp = 1
    component_names = ("x",)
    default_parameters = {"k": 1.0}
    default_initial_state = (1.0,)

    def compute_derivatives(
        self, t: float, state: jnp.ndarray, params: ParameterBundle
    ) -> jnp.ndarray:
        k = params.get_float("k", 1.0)
        return -k * state


class HarmonicOscillator(DynamicalSystem):
    """
    Damped harmonic oscillator written as a first-order system:

        dx/dt = v
        dv/dt = -omega^2 x - 2 zeta omega v
    """

    n_comp = 2
    component_names = ("x", "v")
    default_parameters = {"omega": 1.0, "zeta": 0.0}
    default_initial_state = (1.0, 0.0)

    def compute_derivatives(
        self, t: float, state: jnp.ndarray, params: ParameterBundle
    ) -> jnp.ndarray:
        omega = params.get_float("omega", 1.0)
        zeta = params.get_float("zeta", 0.0)
        x, v = state[0], state[1]
        return jnp.stack([v, -(omega**2) * x - 2.0 * zeta * omega * v])
