import pytest
import numpy as np
from booster_sim import state
from booster_sim.config import create_test_config


@pytest.fixture
def custom_state():
    return state.State(
        vertical_velocity=12.0,
        vertical_acceleration=3.0,
        altitude=500.0,
        mass=150_000.0,
        fuel_mass=30_000.0,
        active_engines=3,
        second_stage_attached=False,
        lateral=[4.0, -2.0],
        t=42.0
    )


def test_state_init_types():
    s = state.State()
    assert isinstance(s.lateral, np.ndarray)
    assert s.lateral.shape == (2,)
    assert isinstance(s.altitude, float)
    assert isinstance(s.active_engines, int)
    assert s.second_stage_attached is True


def test_state_copy(custom_state):
    s2 = custom_state.copy()
    assert np.allclose(s2.to_vector(), custom_state.to_vector())
    assert s2.t == custom_state.t
    # Ensure deep copy
    s2.lateral[0] += 1
    assert not np.allclose(s2.lateral, custom_state.lateral)


def test_lateral_properties(custom_state):
    assert custom_state.lateral_x == 4.0
    assert custom_state.lateral_y == -2.0


def test_has_thrust(custom_state):
    assert custom_state.has_thrust
    s2 = custom_state.copy()
    s2.fuel_mass = 0.0
    assert not s2.has_thrust
    s3 = custom_state.copy()
    s3.active_engines = 0
    assert not s3.has_thrust


def test_to_vector_shape(custom_state):
    vec = custom_state.to_vector()
    assert vec.shape == (9,)
    assert vec[2] == 500.0
    assert vec[-2:].tolist() == [4.0, -2.0]


def test_str(custom_state):
    s = str(custom_state)
    assert "State(" in s
    assert "alt=" in s
    assert "fuel=" in s
    assert "engines=3" in s


def test_create_initial_state_defaults():
    s = state.create_initial_state()
    assert s.altitude == 0.0
    assert s.vertical_velocity == 0.0
    assert s.fuel_mass == 300_000
    assert s.mass == 420_000
    assert s.active_engines == 33
    assert s.second_stage_attached is True
    assert np.allclose(s.lateral, [-1000.0, -1000.0])
    assert s.t == 0.0


def test_create_initial_state_from_config():
    cfg = create_test_config(initial_fuel_mass=1000.0, total_engines=9,
                             initial_x=10.0, initial_y=20.0)
    s = state.create_initial_state(cfg)
    assert s.fuel_mass == 1000.0
    assert s.mass == cfg.empty_mass + 1000.0
    assert s.active_engines == 9
    assert np.allclose(s.lateral, [10.0, 20.0])
