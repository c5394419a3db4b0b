"""Visualization module for gridsim."""

from .base import BaseVisualizer
from .matplotlib_visualization import MatplotlibVisualizer


def create_visualizer(config=None):
    """Create a visualizer from configuration."""
    return MatplotlibVisualizer(config)


__all__ = [
    "BaseVisualizer",
    "MatplotlibVisualizer",
    "create_visualizer",
]
