import yaml
from typer.testing import CliRunner

from gridsim.cli.main import app

runner = CliRunner()


def write_config(tmp_path, **simulation):
    config = {
        "model": {"type": "exponential_decay", "parameters": {"k": 0.5}},
        "simulation": {"time": {"t0": 0.0, "t1": 1.0, "dt": 0.1}, **simulation},
    }
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump(config))
    return path


def test_run_command(tmp_path):
    config_path = write_config(tmp_path)
    out_dir = tmp_path / "out"

    result = runner.invoke(app, ["run", str(config_path), "-o", str(out_dir), "--quiet"])

    assert result.exit_code == 0, result.output
    assert (out_dir / "trajectory.csv").exists()
    assert (out_dir / "trajectory.npz").exists()


def test_run_command_with_override(tmp_path):
    config_path = write_config(tmp_path)
    out_dir = tmp_path / "out"

    result = runner.invoke(
        app,
        ["run", str(config_path), "-o", str(out_dir), "-q", "--set", "simulation.time.dt=0.5"],
    )

    assert result.exit_code == 0, result.output
    lines = (out_dir / "trajectory.csv").read_text().splitlines()
    assert lines[0] == "t,x"
    assert len(lines) == 4


def test_run_command_reports_errors(tmp_path):
    config_path = write_config(tmp_path, stepper="dopri5")

    result = runner.invoke(app, ["run", str(config_path), "-o", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "Unknown stepper" in result.output


def test_run_command_missing_config(tmp_path):
    result = runner.invoke(app, ["run", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_systems_command():
    result = runner.invoke(app, ["systems"])

    assert result.exit_code == 0
    assert "harmonic_oscillator" in result.output
    assert "one_compartment" in result.output


def test_steppers_command():
    result = runner.invoke(app, ["steppers"])

    assert result.exit_code == 0
    assert "rk4: RK4" in result.output
