import pytest
import numpy as np
from booster_sim import main
from booster_sim.config import create_default_config, create_test_config
from booster_sim.mission_manager import FlightPhase
from booster_sim.state import State
from booster_sim.validation import ValidationError


def test_initialize_defaults():
    s, phase = main.initialize(create_default_config())
    assert phase == FlightPhase.LAUNCH
    assert s.fuel_mass == 300_000
    assert s.active_engines == 33
    assert s.second_stage_attached


def test_liftoff_step():
    cfg = create_default_config()
    s, phase = main.initialize(cfg)
    s2, phase2 = main.simulation_step(s, phase, cfg)
    assert s2.altitude > 0
    assert s2.vertical_velocity > 0
    assert phase2 == FlightPhase.LAUNCH
    assert s2.active_engines == 33


def test_is_terminated():
    assert not main.is_terminated(State(altitude=0.0))
    assert not main.is_terminated(State(altitude=10.0))
    assert main.is_terminated(State(altitude=-0.01))


def test_check_termination_touchdown():
    term, reason = main.check_termination(State(altitude=-1.0, t=5.0), max_time=100.0)
    assert term is True
    assert reason == "Landing complete"


def test_check_termination_max_time():
    term, reason = main.check_termination(State(altitude=50.0, t=200.0), max_time=100.0)
    assert term is True
    assert 'Maximum simulation time' in reason


def test_check_termination_continue():
    term, reason = main.check_termination(State(altitude=50.0, t=1.0), max_time=100.0)
    assert term is False
    assert reason is None


def test_telemetry_row():
    cfg = create_default_config()
    s, phase = main.initialize(cfg)
    row = main.telemetry_row(s, phase, cfg)
    assert row['phase'] == 'LAUNCH'
    assert row['distance_to_beacon'] == pytest.approx(np.hypot(1000.0, 1000.0))


def test_run_simulation_max_time():
    cfg = create_test_config(max_time=1.0)
    state, log, result = main.run_simulation(cfg)
    # Allow small floating-point tolerance on time accumulation
    assert 1.0 <= state.t <= 1.0 + 0.15
    assert result.reason == "Maximum simulation time reached"
    assert result.landing is None
    assert not result.landed
    assert len(log) == result.steps


def test_run_simulation_touchdown_from_state():
    cfg = create_test_config()
    s = State(altitude=30.0, vertical_velocity=-10.0, mass=cfg.empty_mass,
              fuel_mass=0.0, active_engines=2, second_stage_attached=False,
              lateral=[0.02, -0.01])
    state, log, result = main.run_simulation(cfg, initial_state=s,
                                             initial_phase=FlightPhase.LANDING)
    assert state.altitude < 0
    assert result.reason == "Landing complete"
    assert result.landed
    assert result.landing.success
    assert log.phase_name[-1] == 'LANDING'
    assert result.phase_history[0] == (0.0, 'LANDING')
    assert result.phase_history[-1][1] == 'TERMINATED'
    # Initial state is copied, not mutated
    assert s.altitude == 30.0


def test_run_simulation_invalid_config():
    cfg = create_test_config(dt=0.0)
    with pytest.raises(ValidationError):
        main.run_simulation(cfg)


def test_run_simulation_validation_failure_stops_run():
    cfg = create_test_config()
    s = State(altitude=100.0, mass=cfg.empty_mass, fuel_mass=0.0,
              active_engines=99)
    state, log, result = main.run_simulation(cfg, initial_state=s)
    assert result.reason.startswith("Validation failure")
    assert result.landing is None
    assert len(log) == 0


def test_run_simulation_realtime_pacing(monkeypatch):
    sleeps = []
    monkeypatch.setattr(main.time, 'sleep', lambda seconds: sleeps.append(seconds))
    cfg = create_test_config(realtime=True)
    s = State(altitude=1.0, vertical_velocity=-5.0, mass=cfg.empty_mass,
              fuel_mass=0.0, active_engines=0, second_stage_attached=False)
    state, log, result = main.run_simulation(cfg, initial_state=s)
    assert result.landed
    # No pause after the terminating tick
    assert sleeps == [cfg.dt] * (result.steps - 1)


def test_run_simulation_verbose_output(capsys):
    cfg = create_test_config(verbose=True, print_interval=0.1)
    s = State(altitude=5.0, vertical_velocity=-10.0, mass=cfg.empty_mass,
              fuel_mass=0.0, active_engines=2, second_stage_attached=False,
              lateral=[0.0, 0.05])
    main.run_simulation(cfg, initial_state=s, initial_phase=FlightPhase.LANDING)
    out = capsys.readouterr().out
    assert "BOOSTER LANDING SIMULATION" in out
    assert "Landing complete." in out
    assert "Success! Landed on the tower." in out


def test_simulation_log_to_arrays():
    cfg = create_default_config()
    log = main.SimulationLog()
    s, phase = main.initialize(cfg)
    for _ in range(3):
        s, phase = main.simulation_step(s, phase, cfg)
        log.append(s, phase, cfg)
    arrays = log.to_arrays()
    assert len(log) == 3
    assert arrays['altitude'].shape == (3,)
    assert arrays['active_engines'].dtype == np.int64
    assert arrays['second_stage_attached'].all()
    assert arrays['phase_name'] == ['LAUNCH'] * 3
