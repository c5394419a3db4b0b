"""High-level workflow orchestration for gridsim."""

from pathlib import Path
from typing import Any, Dict, Optional, Sequence
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
import time
import yaml

from .config import Config, load_config, save_config
from .dynamics import create_system
from .simulation import create_simulator
from .visualization import create_visualizer

console = Console()


def run_simulation(
    config: Config,
    output_dir: Optional[Path] = None,
    verbose: bool = True,
    save_intermediate: bool = True,
) -> Dict[str, Any]:
    """
    Create the model, simulate it on the configured grid and save the outputs.

    Args:
        config: Complete configuration object
        output_dir: Directory to save outputs (defaults to config.output_dir)
        verbose: Whether to print progress information
        save_intermediate: Whether to write the table, figure and summary

    Returns:
        Dictionary with the system, the result table and written file paths
    """
    if output_dir is None:
        output_dir = config.output_dir
    output_dir = Path(output_dir)
    if save_intermediate:
        output_dir.mkdir(parents=True, exist_ok=True)

    results: Dict[str, Any] = {"output_dir": output_dir}

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        disable=not verbose,
    ) as progress:

        # Step 1: Create and initialize the model
        task1 = progress.add_task("🔧 Creating model...", total=None)
        system = create_system(config.model)
        progress.update(task1, description="✅ Model created")

        if verbose:
            console.print(
                f"[green]✓[/green] Created {config.model.type} model with "
                f"{system.n_comp} components {system.get_column_names()}"
            )

        # Step 2: Run simulation
        task2 = progress.add_task("🚀 Running simulation...", total=None)
        simulator = create_simulator(system, config.simulation)
        table = simulator.run()
        progress.update(task2, description="✅ Simulation completed")

        if verbose:
            console.print(
                f"[green]✓[/green] Simulation completed: {table.n_steps} grid points "
                f"up to t={table.metadata['t_end']:.4g}"
            )
            if table.truncated:
                console.print(
                    f"[yellow]⚠️[/yellow] Only {table.n_filled} rows were produced; "
                    f"the rest are zero"
                )

        results["system"] = system
        results["table"] = table
        results["trajectory_info"] = simulator.get_trajectory_info()

        if save_intermediate:
            npz_path = table.save(output_dir / "trajectory.npz")
            csv_path = table.save(output_dir / "trajectory.csv")
            save_config(config, output_dir / "config.yaml")
            results["files"] = {"npz": npz_path, "csv": csv_path}
            if verbose:
                console.print(f"[blue]💾[/blue] Trajectory saved to {npz_path} and {csv_path}")

        # Step 3: Visualization (optional)
        vis_config = config.visualization
        if save_intermediate and vis_config is not None and vis_config.enabled:
            task3 = progress.add_task("🎨 Plotting trajectory...", total=None)
            visualizer = create_visualizer(vis_config)
            save_path = Path(vis_config.save_path or "trajectory.png")
            # Figures always land in the output directory
            save_path = output_dir / save_path.name
            visualizer.visualize(table, save_path=save_path)
            results["files"]["figure"] = save_path
            progress.update(task3, description="✅ Trajectory plotted")
            if verbose:
                console.print(f"[blue]💾[/blue] Figure saved to {save_path}")

    if save_intermediate:
        summary_path = output_dir / "summary.yaml"
        save_run_summary(results, summary_path)
        if verbose:
            console.print(f"[blue]💾[/blue] Run summary saved to {summary_path}")

    if verbose:
        console.print(f"\n[bold green]🎉 Simulation completed successfully![/bold green]")

    return results


def run_simulation_from_config_file(
    config_path: str,
    output_dir: Optional[str] = None,
    overrides: Optional[Sequence[str]] = None,
    **kwargs,
) -> Dict[str, Any]:
    """
    Run a simulation from a configuration file.

    Args:
        config_path: Path to YAML configuration file
        output_dir: Output directory (optional)
        overrides: Dotted ``key=value`` overrides applied on top of the file
        **kwargs: Additional arguments passed to run_simulation

    Returns:
        Simulation results
    """
    config = load_config(config_path, overrides=overrides)

    if output_dir is not None:
        config.output_dir = Path(output_dir)

    return run_simulation(config, **kwargs)


def save_run_summary(results: Dict[str, Any], save_path: Path) -> None:
    """Save a summary of simulation results."""
    table = results["table"]
    summary = {
        "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
        "model": results["system"].__class__.__name__,
        "columns": list(table.column_names),
        **results["trajectory_info"],
        "metadata": {k: v for k, v in table.metadata.items()},
        "files": {k: str(v) for k, v in results.get("files", {}).items()},
    }

    with open(save_path, "w") as f:
        yaml.dump(summary, f, default_flow_style=False, indent=2)
