"""Classic fourth-order Runge-Kutta as a diffrax explicit RK solver."""

from typing import Callable, ClassVar

import numpy as np
from diffrax import AbstractERK, ButcherTableau, LocalLinearInterpolation


# Embedded "error" weights are the difference to explicit Euler. They are only
# consulted by adaptive step-size controllers, which gridsim never uses.
_rk4_tableau = ButcherTableau(
    c=np.array([0.5, 0.5, 1.0]),
    b_sol=np.array([1 / 6, 1 / 3, 1 / 3, 1 / 6]),
    b_error=np.array([1 / 6 - 1.0, 1 / 3, 1 / 3, 1 / 6]),
    a_lower=(
        np.array([0.5]),
        np.array([0.0, 0.5]),
        np.array([0.0, 0.0, 1.0]),
    ),
)


class RK4(AbstractERK):
    """The classic 4-stage, 4th order Runge-Kutta method.

    Stages: k1 = f(t, y), k2 = f(t + h/2, y + h k1/2), k3 = f(t + h/2, y + h k2/2),
    k4 = f(t + h, y + h k3); update y + h (k1 + 2 k2 + 2 k3 + k4) / 6.
    """

    tableau: ClassVar[ButcherTableau] = _rk4_tableau
    interpolation_cls: ClassVar[
        Callable[..., LocalLinearInterpolation]
    ] = LocalLinearInterpolation

    def order(self, terms):
        return 4
