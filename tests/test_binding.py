import math

import jax.numpy as jnp
import numpy as np
import pytest

import gridsim
from gridsim.dynamics.systems import ExponentialDecay


def test_sim_returns_matrix():
    out = gridsim.sim([1.0, 0.0], [0.0, 1.0], {"omega": 1.0}, 0.5)

    assert isinstance(out, np.ndarray)
    assert out.shape == (3, 3)
    np.testing.assert_array_equal(out[:, 0], [0.0, 0.5, 1.0])
    np.testing.assert_array_equal(out[0, 1:], [1.0, 0.0])


def test_sim_returns_double_precision_rows():
    out = gridsim.sim([0.1, 0.2], [0.0, 0.0], {}, 0.1)

    assert out.dtype == np.float64
    assert out.tolist() == [[0.0, 0.1, 0.2]]


def test_sim_accepts_host_array_types():
    from_list = gridsim.sim([1.0, 0.0], [0.0, 2.0], {}, 0.1)
    from_numpy = gridsim.sim(np.array([1.0, 0.0]), np.array([0.0, 2.0]), {}, 0.1)
    from_jax = gridsim.sim(jnp.array([1.0, 0.0]), jnp.array([0.0, 2.0]), {}, 0.1)

    np.testing.assert_array_equal(from_list, from_numpy)
    np.testing.assert_array_equal(from_list, from_jax)


def test_sim_with_model_name_and_instance():
    by_name = gridsim.sim([2.0], [0.0, 1.0], {"k": 0.5}, 0.1, model="exponential_decay")
    by_instance = gridsim.sim([2.0], [0.0, 1.0], {"k": 0.5}, 0.1, model=ExponentialDecay())

    np.testing.assert_array_equal(by_name, by_instance)
    assert by_name[-1, 1] == pytest.approx(2.0 * math.exp(-0.5), rel=1e-7)


def test_sim_requires_method_field_when_configured():
    with pytest.raises(gridsim.ParameterError):
        gridsim.sim([1.0, 0.0], [0.0, 1.0], {"omega": 1.0}, 0.5, method_field="test")

    out = gridsim.sim([1.0, 0.0], [0.0, 1.0], {"test": "rk4"}, 0.5, method_field="test")
    assert out.shape == (3, 3)


def test_sim_rejects_wrong_state_length():
    with pytest.raises(gridsim.StateShapeError):
        gridsim.sim([1.0], [0.0, 1.0], {}, 0.5)


def test_sim_rejects_non_mapping_parameters():
    with pytest.raises(gridsim.ParameterError):
        gridsim.sim([1.0, 0.0], [0.0, 1.0], [1.0, 2.0], 0.5)
