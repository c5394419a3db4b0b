"""Dynamics module for defining and creating models."""

from .base import DynamicalSystem
from .factory import (
    create_system,
    get_system_class,
    list_available_systems,
    register_system,
)
from . import systems

__all__ = [
    "DynamicalSystem",
    "create_system",
    "get_system_class",
    "list_available_systems",
    "register_system",
    "systems",
]
