"""Registry of models that can be simulated by name."""

from typing import Any, Dict, Type, Union
from .base import DynamicalSystem
from ..config.schemas import ModelConfig

from .systems.linear import ExponentialDecay, HarmonicOscillator
from .systems.lotka_volterra import LotkaVolterra
from .systems.pharmacokinetics import OneCompartmentOral, TwoCompartmentOral


SYSTEM_REGISTRY: Dict[str, Type[DynamicalSystem]] = {
    "exponential_decay": ExponentialDecay,
    "harmonic_oscillator": HarmonicOscillator,
    "lotka_volterra": LotkaVolterra,
    "one_compartment": OneCompartmentOral,
    "two_compartment": TwoCompartmentOral,
}


def get_system_class(name: str) -> Type[DynamicalSystem]:
    """Look up a registered model class, raising ValueError for unknown names."""
    if name not in SYSTEM_REGISTRY:
        raise ValueError(
            f"Unknown model: {name}. Available types: {sorted(SYSTEM_REGISTRY)}"
        )
    return SYSTEM_REGISTRY[name]


def create_system(model: Union[str, ModelConfig], **parameters: Any) -> DynamicalSystem:
    """
    Create and initialize a model.

    Args:
        model: Registered model name, or a ModelConfig naming one
        **parameters: Parameter values layered over the configured ones

    Returns:
        Initialized model; parameters missing from the configuration fall
        back to the model's defaults

    Example:
        >>> system = create_system("one_compartment", ka=0.8)
        >>> system.parameters["ka"], system.parameters["v"]
        (0.8, 10.0)
    """
    if isinstance(model, str):
        config = ModelConfig(type=model, parameters=dict(parameters))
    else:
        config = model
        if parameters:
            config = ModelConfig(
                type=model.type,
                parameters={**model.parameters, **parameters},
                initial_state=model.initial_state,
            )

    system = get_system_class(config.type)()
    system.initialize(config)
    return system


def register_system(
    name: str, system_class: Type[DynamicalSystem], overwrite: bool = False
) -> None:
    """
    Make ``system_class`` available to :func:`create_system` under ``name``.

    Raises:
        ValueError: If the class is not a DynamicalSystem, declares no state
            components, names the wrong number of components, or ``name``
            is taken and ``overwrite`` is False
    """
    if not (isinstance(system_class, type) and issubclass(system_class, DynamicalSystem)):
        raise ValueError("system_class must be a subclass of DynamicalSystem")
    if system_class.n_comp < 1:
        raise ValueError(
            f"{system_class.__name__}.n_comp must be at least 1, got {system_class.n_comp}"
        )
    names = system_class.component_names
    if names and len(names) != system_class.n_comp:
        raise ValueError(
            f"{system_class.__name__} names {len(names)} components "
            f"but has n_comp={system_class.n_comp}"
        )
    if name in SYSTEM_REGISTRY and not overwrite:
        raise ValueError(f"Model '{name}' is already registered")

    SYSTEM_REGISTRY[name] = system_class


def list_available_systems() -> Dict[str, Type[DynamicalSystem]]:
    return SYSTEM_REGISTRY.copy()
