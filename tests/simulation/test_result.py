import numpy as np
import pytest

from gridsim.simulation import ResultTable


def make_table():
    data = np.array(
        [
            [0.0, 1.0, 0.0],
            [0.5, 0.8, -0.4],
            [0.0, 0.0, 0.0],
        ]
    )
    return ResultTable(data=data, n_filled=2, column_names=("t", "x", "v"))


def test_table_properties():
    table = make_table()

    assert table.n_steps == 3
    assert table.n_comp == 2
    assert table.truncated
    np.testing.assert_array_equal(table.component("v"), [0.0, -0.4, 0.0])
    np.testing.assert_array_equal(np.asarray(table), table.data)


def test_unknown_component():
    with pytest.raises(KeyError):
        make_table().component("t")


def test_npz_round_trip(tmp_path):
    table = make_table()
    path = table.save(tmp_path / "out" / "table.npz")

    loaded = ResultTable.load(path)

    np.testing.assert_array_equal(loaded.data, table.data)
    assert loaded.n_filled == 2
    assert loaded.column_names == ("t", "x", "v")


def test_csv_has_header(tmp_path):
    path = make_table().save(tmp_path / "table.csv")

    lines = path.read_text().splitlines()

    assert lines[0] == "t,x,v"
    assert len(lines) == 4
    np.testing.assert_allclose(
        np.loadtxt(path, delimiter=",", skiprows=1), make_table().data
    )


def test_unsupported_format(tmp_path):
    with pytest.raises(ValueError):
        make_table().save(tmp_path / "table.json")


def test_npz_round_trip_keeps_metadata(tmp_path):
    table = make_table()
    table.metadata.update(stepper="rk4", step_size=0.5, method="rk4", t_end=1.0)
    path = table.save(tmp_path / "table.npz")

    loaded = ResultTable.load(path)

    assert loaded.metadata == table.metadata


def test_load_tolerates_archives_without_metadata(tmp_path):
    path = tmp_path / "bare.npz"
    np.savez(path, data=np.zeros((1, 2)), n_filled=1, column_names=np.asarray(["t", "x"]))

    assert ResultTable.load(path).metadata == {}
