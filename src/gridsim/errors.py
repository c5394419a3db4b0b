"""Exceptions raised by gridsim."""


class GridSimError(Exception):
    """Base class for all gridsim errors."""


class ParameterError(GridSimError, KeyError):
    """A parameter bundle is missing a field or holds the wrong type."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0]) if self.args else ""


class StateShapeError(GridSimError, ValueError):
    """The initial state does not have exactly ``n_comp`` components."""


class TimeSpanError(GridSimError, ValueError):
    """Invalid time span or step size."""


class TruncatedTrajectoryError(GridSimError):
    """The integrator emitted fewer grid points than the result table holds."""

    def __init__(self, n_expected: int, n_received: int):
        self.n_expected = n_expected
        self.n_received = n_received
        super().__init__(
            f"Integrator produced {n_received} points, expected {n_expected}"
        )


class TruncatedTrajectoryWarning(UserWarning):
    """Issued when trailing rows of a result table were left zero-filled."""
