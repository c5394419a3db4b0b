"""Main CLI entry point for gridsim."""

import typer
from pathlib import Path
from typing import List, Optional
from rich.console import Console

from ..dynamics import list_available_systems
from ..integrators import list_available_steppers
from ..workflow import run_simulation_from_config_file

app = typer.Typer(
    name="gridsim",
    help="Fixed-step trajectory simulation on a uniform time grid",
    add_completion=False,
)

console = Console()


@app.command()
def run(
    config: Path = typer.Argument(..., help="Configuration file path"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output directory"),
    overrides: Optional[List[str]] = typer.Option(
        None, "--set", "-s", help="Override a config value, e.g. simulation.time.dt=0.05"
    ),
    verbose: bool = typer.Option(True, "--verbose/--quiet", "-v/-q", help="Verbose output"),
    save_intermediate: bool = typer.Option(True, "--save/--no-save", help="Write output files"),
):
    """Simulate the model described by a configuration file."""
    try:
        results = run_simulation_from_config_file(
            str(config),
            output_dir=str(output) if output else None,
            overrides=overrides or [],
            verbose=verbose,
            save_intermediate=save_intermediate,
        )

        if verbose:
            console.print(f"[green]✅ Run completed successfully![/green]")
            console.print(f"Results available in: {results.get('output_dir', 'outputs/')}")

    except Exception as e:
        console.print(f"[red]❌ Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def systems():
    """List registered models."""
    for name, cls in list_available_systems().items():
        components = ", ".join(cls.component_names) or "-"
        console.print(f"{name}: {cls.__name__} (n_comp={cls.n_comp}; {components})")


@app.command()
def steppers():
    """List registered fixed-step steppers."""
    for name, cls in list_available_steppers().items():
        console.print(f"{name}: {cls.__name__}")


if __name__ == "__main__":
    app()
