import jax.numpy as jnp
from ..base import DynamicalSystem
from ...parameters import ParameterBundle


class LotkaVolterra(DynamicalSystem):
    """Predator-prey dynamics.

    dx/dt = alpha x - beta x y
    dy/dt = delta x y - gamma y
    """

    n_comp = 2
    component_names = ("prey", "predator")
    default_parameters = {"alpha": 1.1, "beta": 0.4, "delta": 0.1, "gamma": 0.4}
    default_initial_state = (10.0, 10.0)

    def compute_derivatives(
        self, t: float, state: jnp.ndarray, params: ParameterBundle
    ) -> jnp.ndarray:
        alpha = params.get_float("alpha", 1.1)
        beta = params.get_float("beta", 0.4)
        delta = params.get_float("delta", 0.1)
        gamma = params.get_float("gamma", 0.4)
        prey, predator = state[0], state[1]
        return jnp.stack(
            [
                alpha * prey - beta * prey * predator,
                delta * prey * predator - gamma * predator,
            ]
        )
