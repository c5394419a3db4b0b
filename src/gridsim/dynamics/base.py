"""Base classes for dynamical systems."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple
import jax.numpy as jnp
import numpy as np
from ..config.schemas import ModelConfig
from ..errors import StateShapeError
from ..parameters import ParameterBundle


class DynamicalSystem(ABC):
    """Abstract base class for all models simulated on a time grid.

    Subclasses fix ``n_comp``, the number of state components, and provide
    the derivative function. Parameters arrive as a :class:`ParameterBundle`
    on every call so one instance can be simulated with many bundles.
    """

    n_comp: int = 0
    component_names: Tuple[str, ...] = ()
    default_parameters: Dict[str, Any] = {}
    default_initial_state: Tuple[float, ...] = ()

    def __init__(self):
        self.config: Optional[ModelConfig] = None
        self.parameters: ParameterBundle = ParameterBundle(self.default_parameters)
        self.state: Optional[jnp.ndarray] = None
        self.initialized: bool = False

    def initialize(self, config: ModelConfig) -> None:
        """
        Initialize the system with the provided configuration.

        Args:
            config: Configuration object specifying parameters and initial state
        """
        self.config = config
        params = dict(self.default_parameters)
        params.update(config.parameters)
        self.parameters = ParameterBundle(params)

        initial_state = config.initial_state
        if initial_state is None or len(initial_state) == 0:
            initial_state = list(self.default_initial_state)
        self.state = self.validate_state(initial_state)
        self.initialized = True

    @abstractmethod
    def compute_derivatives(
        self, t: float, state: jnp.ndarray, params: ParameterBundle
    ) -> jnp.ndarray:
        """
        Compute the derivative of the system at the given state.

        Args:
            t: Current time
            state: Current state vector of length ``n_comp``
            params: Parameter bundle

        Returns:
            Time derivative of the state
        """
        pass

    def return_state(self) -> jnp.ndarray:
        """Return the current (initial) state of the system."""
        return self.state

    def validate_state(self, state) -> jnp.ndarray:
        """
        Copy ``state`` into a fresh state vector, checking its length.

        Raises:
            StateShapeError: If ``state`` is not a flat sequence of ``n_comp`` reals
        """
        values = np.asarray(state, dtype=float)
        if values.shape != self.get_expected_state_shape():
            raise StateShapeError(
                f"{self.__class__.__name__} expects a state of shape "
                f"{self.get_expected_state_shape()}, got {values.shape}"
            )
        return jnp.asarray(values, dtype=jnp.float64)

    def get_expected_state_shape(self) -> Tuple[int, ...]:
        return (self.n_comp,)

    def get_column_names(self) -> Tuple[str, ...]:
        if len(self.component_names) == self.n_comp:
            return self.component_names
        return tuple(f"x{j}" for j in range(self.n_comp))
