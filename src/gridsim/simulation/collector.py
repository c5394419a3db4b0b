"""Append-only trajectory buffer used as the integrator observer."""

from dataclasses import dataclass
from typing import List, Optional

import numpy as np


@dataclass(frozen=True)
class Trajectory:
    """Ordered (time, state) samples produced by one integration."""

    times: np.ndarray
    """(T,) array of grid times"""

    states: np.ndarray
    """(T, n_comp) array of states"""

    def __len__(self) -> int:
        return int(self.times.shape[0])


class TrajectoryCollector:
    """
    Observer that records every accepted ``(state, t)`` pair in order.

    A collector belongs to a single simulation call. Each state is copied on
    arrival, and :meth:`to_trajectory` hands the samples over and closes the
    collector so it cannot be reused.
    """

    def __init__(self, n_comp: Optional[int] = None):
        self.n_comp = n_comp
        self._times: List[float] = []
        self._states: List[np.ndarray] = []
        self._closed = False

    def __call__(self, state, t: float) -> None:
        if self._closed:
            raise RuntimeError("TrajectoryCollector has already been consumed")
        self._states.append(np.array(state, dtype=float).reshape(-1))
        self._times.append(float(t))

    def __len__(self) -> int:
        return len(self._times)

    def to_trajectory(self) -> Trajectory:
        """Return the collected samples and close the collector."""
        self._closed = True
        n_comp = self.n_comp
        if n_comp is None:
            n_comp = self._states[0].shape[0] if self._states else 0

        times = np.asarray(self._times, dtype=float)
        if self._states:
            states = np.stack(self._states)
        else:
            states = np.zeros((0, n_comp))
        self._times, self._states = [], []
        return Trajectory(times=times, states=states)
