import pytest
from booster_sim import mass
from booster_sim.config import create_default_config
from booster_sim.state import State


@pytest.fixture
def cfg():
    return create_default_config()


def test_fuel_flow_rate(cfg):
    assert mass.compute_fuel_flow_rate(33, cfg) == pytest.approx(8250.0)
    assert mass.compute_fuel_flow_rate(0, cfg) == 0.0


def test_fuel_consumed_normal(cfg):
    assert mass.compute_fuel_consumed(10_000.0, 8250.0, 0.1) == pytest.approx(825.0)


def test_fuel_consumed_clamped(cfg):
    assert mass.compute_fuel_consumed(100.0, 8250.0, 0.1) == pytest.approx(100.0)


def test_update_fuel_never_negative(cfg):
    assert mass.update_fuel(100.0, 8250.0, 0.1) == 0.0
    assert mass.update_fuel(0.0, 8250.0, 0.1) == 0.0


def test_vehicle_mass_excludes_second_stage(cfg):
    assert mass.compute_vehicle_mass(1000.0, cfg) == pytest.approx(121_000.0)


def test_total_mass_with_second_stage(cfg):
    s = State(mass=130_000.0, second_stage_attached=True)
    assert mass.compute_total_mass(s, cfg) == pytest.approx(180_000.0)
    s.second_stage_attached = False
    assert mass.compute_total_mass(s, cfg) == pytest.approx(130_000.0)
