import jax.numpy as jnp
import numpy as np
import pytest

from gridsim.config import ModelConfig
from gridsim.dynamics import DynamicalSystem, create_system, list_available_systems, register_system
from gridsim.dynamics import factory
from gridsim.errors import StateShapeError
from gridsim.simulation import GridSimulator


@pytest.mark.parametrize("name", sorted(list_available_systems()))
def test_registered_systems_initialize(name):
    system = create_system(ModelConfig(type=name))

    assert system.initialized
    assert system.return_state().shape == (system.n_comp,)
    assert len(system.get_column_names()) == system.n_comp

    derivative = system.compute_derivatives(0.0, system.return_state(), system.parameters)
    assert derivative.shape == (system.n_comp,)


def test_config_parameters_override_defaults():
    system = create_system(
        ModelConfig(type="harmonic_oscillator", parameters={"omega": 3.0})
    )

    assert system.parameters["omega"] == 3.0
    assert system.parameters["zeta"] == 0.0


def test_create_by_name_with_parameter_overrides():
    system = create_system("one_compartment", ka=0.8)

    assert system.parameters["ka"] == 0.8
    assert system.parameters["v"] == 10.0
    assert system.return_state().tolist() == [100.0, 0.0]


def test_keyword_parameters_layer_over_config():
    config = ModelConfig(
        type="harmonic_oscillator", parameters={"omega": 3.0, "zeta": 0.1}
    )
    system = create_system(config, zeta=0.5)

    assert system.parameters["omega"] == 3.0
    assert system.parameters["zeta"] == 0.5
    assert config.parameters["zeta"] == 0.1


@pytest.mark.parametrize("model", ["pendulum", ModelConfig(type="pendulum")])
def test_unknown_system(model):
    with pytest.raises(ValueError, match="Available types"):
        create_system(model)


def test_initial_state_length_is_checked():
    with pytest.raises(StateShapeError):
        create_system(ModelConfig(type="lotka_volterra", initial_state=[1.0]))


def test_one_compartment_conserves_mass_without_elimination():
    system = create_system(
        ModelConfig(type="one_compartment", parameters={"ka": 0.8, "cl": 0.0})
    )
    table = GridSimulator.from_system(system).run(
        system.return_state(), (0.0, 10.0), system.parameters, 0.1
    )

    totals = table.states.sum(axis=1)
    np.testing.assert_allclose(totals, 100.0, rtol=1e-12)
    assert table.column_names == ("t", "depot", "central")


def test_harmonic_oscillator_tracks_cosine():
    system = create_system(ModelConfig(type="harmonic_oscillator"))
    table = GridSimulator.from_system(system).run([1.0, 0.0], (0.0, 2.0), {}, 0.01)

    np.testing.assert_allclose(table.component("x"), np.cos(table.times), atol=1e-8)


class Constant(DynamicalSystem):
    n_comp = 1

    def compute_derivatives(self, t, state, params):
        return jnp.ones_like(state)


@pytest.fixture
def registry(monkeypatch):
    monkeypatch.setattr(factory, "SYSTEM_REGISTRY", dict(factory.SYSTEM_REGISTRY))
    return factory.SYSTEM_REGISTRY


def test_register_custom_system(registry):
    register_system("constant", Constant)

    assert registry["constant"] is Constant
    system = create_system(ModelConfig(type="constant", initial_state=[0.0]))

    assert system.get_column_names() == ("x0",)


def test_register_rejects_non_systems(registry):
    with pytest.raises(ValueError, match="subclass of DynamicalSystem"):
        register_system("bad", object)


class Stateless(DynamicalSystem):
    def compute_derivatives(self, t, state, params):
        return state


class Misnamed(Constant):
    component_names = ("a", "b")


def test_register_requires_state_components(registry):
    with pytest.raises(ValueError, match="n_comp must be at least 1"):
        register_system("stateless", Stateless)

    assert "stateless" not in registry


def test_register_checks_component_names(registry):
    with pytest.raises(ValueError, match="names 2 components"):
        register_system("misnamed", Misnamed)


def test_register_refuses_to_shadow_without_overwrite(registry):
    with pytest.raises(ValueError, match="already registered"):
        register_system("harmonic_oscillator", Constant)

    register_system("harmonic_oscillator", Constant, overwrite=True)
    assert registry["harmonic_oscillator"] is Constant
