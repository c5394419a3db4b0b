"""Command line interface for gridsim."""

from .main import app, run, steppers, systems

__all__ = ["app", "run", "steppers", "systems"]
