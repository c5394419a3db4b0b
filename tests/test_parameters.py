import jax.numpy as jnp
import numpy as np
import pytest

from gridsim.errors import ParameterError
from gridsim.parameters import ParameterBundle


def test_get_field_success():
    result = ParameterBundle({"test": "rk4"}).get_str("test")

    assert result.ok
    assert result.unwrap() == "rk4"


def test_get_field_missing():
    result = ParameterBundle({"a": 1}).get_field("test")

    assert not result.ok
    assert result.unwrap_or("fallback") == "fallback"
    with pytest.raises(ParameterError):
        result.unwrap()


def test_get_field_wrong_type():
    result = ParameterBundle({"test": 1.5}).get_str("test")

    assert not result.ok
    assert "must be str" in result.error


def test_parameter_error_is_a_key_error():
    with pytest.raises(KeyError):
        ParameterBundle().get_field("missing").unwrap()


def test_get_float():
    bundle = ParameterBundle({"k": 2, "name": "decay"})

    assert bundle.get_float("k") == 2.0
    assert bundle.get_float("rate", 0.5) == 0.5
    with pytest.raises(ParameterError):
        bundle.get_float("name", 1.0)
    with pytest.raises(ParameterError):
        bundle.get_float("rate")


def test_bundle_is_read_only():
    bundle = ParameterBundle({"k": 1.0})

    with pytest.raises(TypeError):
        bundle["k"] = 2.0


def test_coerce():
    bundle = ParameterBundle(k=1.0)

    assert ParameterBundle.coerce(bundle) is bundle
    assert len(ParameterBundle.coerce(None)) == 0
    assert dict(ParameterBundle.coerce({"a": 1})) == {"a": 1}
    with pytest.raises(ParameterError):
        ParameterBundle.coerce([("a", 1)])


@pytest.mark.parametrize(
    "value", [np.array(2.5), np.float32(2.5), jnp.array(2.5), np.int64(2)]
)
def test_get_float_accepts_numeric_scalars(value):
    result = ParameterBundle({"k": value}).get_float("k")

    assert isinstance(result, float)
    assert result == float(value)


@pytest.mark.parametrize("value", ["2.5", b"2.5", None, [1.0, 2.0], np.array([1.0, 2.0])])
def test_get_float_rejects_non_scalars(value):
    with pytest.raises(ParameterError, match="must be numeric"):
        ParameterBundle({"k": value}).get_float("k")
