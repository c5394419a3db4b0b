"""Dense result table returned by a grid simulation."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import numpy as np


@dataclass
class ResultTable:
    """
    Time column followed by one column per state component.

    ``data`` has shape ``(n_steps, n_comp + 1)``. Only the first ``n_filled``
    rows come from the integrator; any remaining rows are zero.
    """

    data: np.ndarray
    n_filled: int
    column_names: Tuple[str, ...]
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def n_steps(self) -> int:
        return int(self.data.shape[0])

    @property
    def n_comp(self) -> int:
        return int(self.data.shape[1]) - 1

    @property
    def truncated(self) -> bool:
        return self.n_filled < self.n_steps

    @property
    def times(self) -> np.ndarray:
        return self.data[:, 0]

    @property
    def states(self) -> np.ndarray:
        return self.data[:, 1:]

    def component(self, name: str) -> np.ndarray:
        """Column of the state component called ``name``."""
        if name not in self.column_names[1:]:
            raise KeyError(
                f"Unknown component: {name}. Available: {list(self.column_names[1:])}"
            )
        return self.data[:, self.column_names.index(name)]

    def to_numpy(self) -> np.ndarray:
        return self.data.copy()

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self.data
        return self.data.astype(dtype)

    def save(self, path: Union[str, Path]) -> Path:
        """Save as ``.npz`` (data, column names and metadata) or ``.csv`` by file suffix."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        if path.suffix == ".csv":
            np.savetxt(
                path,
                self.data,
                delimiter=",",
                header=",".join(self.column_names),
                comments="",
            )
        elif path.suffix == ".npz":
            np.savez(
                path,
                data=self.data,
                n_filled=self.n_filled,
                column_names=np.asarray(self.column_names),
                metadata=json.dumps(self.metadata),
            )
        else:
            raise ValueError(f"Unsupported output format: {path.suffix}")
        return path

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ResultTable":
        """Load a table written by :meth:`save` in ``.npz`` format."""
        with np.load(Path(path)) as archive:
            metadata = {}
            if "metadata" in archive.files:
                metadata = json.loads(str(archive["metadata"]))
            return cls(
                data=archive["data"],
                n_filled=int(archive["n_filled"]),
                column_names=tuple(str(c) for c in archive["column_names"]),
                metadata=metadata,
            )
