"""Model implementations."""

from .linear import ExponentialDecay, HarmonicOscillator
from .lotka_volterra import LotkaVolterra
from .pharmacokinetics import OneCompartmentOral, TwoCompartmentOral

__all__ = [
    "ExponentialDecay",
    "HarmonicOscillator",
    "LotkaVolterra",
    "OneCompartmentOral",
    "TwoCompartmentOral",
]
