from pathlib import Path
from typing import Optional, Sequence, Union

import matplotlib.pyplot as plt
import numpy as np

from ..simulation.result import ResultTable
from .base import BaseVisualizer


class MatplotlibVisualizer(BaseVisualizer):
    """
    Line plot of state components against time.
    """

    def visualize(
        self,
        table: ResultTable,
        save_path: Optional[Union[str, Path]] = None,
        components: Optional[Sequence[str]] = None,
        **kwargs,
    ):
        """
        Plot a result table.

        Args:
            table: ResultTable to plot; zero-filled trailing rows are skipped
            save_path: Path to save the figure (png, pdf, ...)
            components: Component names to plot (defaults to config, then all)
            **kwargs: Additional arguments (e.g., title)
        Returns:
            fig: The matplotlib Figure
        """
        if components is None:
            components = getattr(self.config, "components", None)
        if components is None:
            components = table.column_names[1:]
        title = kwargs.pop("title", None) or getattr(self.config, "title", None)

        n = table.n_filled
        times = np.asarray(table.times[:n])

        fig, ax = plt.subplots(figsize=(8, 4.5))
        for name in components:
            ax.plot(times, table.component(name)[:n], label=name, **kwargs)
        ax.set_xlabel(table.column_names[0])
        ax.set_ylabel("state")
        if title:
            ax.set_title(title)
        ax.legend(loc="best")
        fig.tight_layout()

        if save_path is not None:
            save_path = Path(save_path)
            save_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(save_path, dpi=150)
            plt.close(fig)
        return fig
