import jax.numpy as jnp
from ..base import DynamicalSystem
from ...parameters import ParameterBundle


class OneCompartmentOral(DynamicalSystem):
    """
    One-compartment model with first-order absorption from a depot.

    State holds drug amounts, not concentrations:

        dA_depot/dt   = -ka A_depot
        dA_central/dt =  ka A_depot - (CL / V) A_central
    """

    n_comp = 2
    component_names = ("depot", "central")
    default_parameters = {"ka": 1.0, "cl": 1.0, "v": 10.0}
    default_initial_state = (100.0, 0.0)

    def compute_derivatives(
        self, t: float, state: jnp.ndarray, params: ParameterBundle
    ) -> jnp.ndarray:
        ka = params.get_float("ka", 1.0)
        ke = params.get_float("cl", 1.0) / params.get_float("v", 10.0)
        depot, central = state[0], state[1]
        return jnp.stack([-ka * depot, ka * depot - ke * central])


class TwoCompartmentOral(DynamicalSystem):
    """
    Two-compartment model with first-order absorption.

    Central and peripheral exchange through the inter-compartmental
    clearance ``q``; elimination happens from the central compartment.
    """

    n_comp = 3
    component_names = ("depot", "central", "peripheral")
    default_parameters = {"ka": 1.0, "cl": 1.0, "v": 10.0, "q": 0.5, "v2": 20.0}
    default_initial_state = (100.0, 0.0, 0.0)

    def compute_derivatives(
        self, t: float, state: jnp.ndarray, params: ParameterBundle
    ) -> jnp.ndarray:
        ka = params.get_float("ka", 1.0)
        v = params.get_float("v", 10.0)
        k10 = params.get_float("cl", 1.0) / v
        k12 = params.get_float("q", 0.5) / v
        k21 = params.get_float("q", 0.5) / params.get_float("v2", 20.0)
        depot, central, peripheral = state[0], state[1], state[2]
        return jnp.stack(
            [
                -ka * depot,
                ka * depot - (k10 + k12) * central + k21 * peripheral,
                k12 * central - k21 * peripheral,
            ]
        )
