"""
Booster Landing Simulation - Main Entry Point

This module implements the core tick boundary and the simulation loop:
- initialize / simulation_step / is_terminated / evaluate
- Correct execution order per timestep (integrate, then phase controller)
- Data logging
- Logging framework for diagnostics

Coordinate Frames:
- Vertical: altitude above the pad, positive up
- Lateral: [x, y] in the beacon frame (metres)
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from .config import SimulationConfig, create_default_config
from .state import State, create_initial_state
from .integrators import euler_step
from .mission_manager import FlightPhase, MissionManager, advance_phase
from .guidance import distance_to_beacon
from .recovery import LandingResult, evaluate_landing
from .validation import validate_config, validate_state, ValidationError
from .types import TelemetryRow
from . import constants as C

# Configure module logger
logger = logging.getLogger(__name__)


# =============================================================================
# CORE TICK BOUNDARY
# =============================================================================

def initialize(config: SimulationConfig = None) -> Tuple[State, FlightPhase]:
    """
    Create the launch state and initial phase.

    Returns:
        (state, FlightPhase.LAUNCH) tuple
    """
    if config is None:
        config = create_default_config()
    return create_initial_state(config), FlightPhase.LAUNCH


def simulation_step(state: State, phase: FlightPhase,
                    config: SimulationConfig) -> Tuple[State, FlightPhase]:
    """
    Advance the simulation by one fixed time step.

    Execution order:
        1. Integrate vertical kinematics, lateral drift and fuel burn
        2. Phase controller (engine schedule, staging, landing guidance)

    Args:
        state: Current state
        phase: Current flight phase
        config: Simulation configuration

    Returns:
        (new_state, new_phase) tuple
    """
    new_state = euler_step(state, config)
    return advance_phase(new_state, phase, config)


def is_terminated(state: State) -> bool:
    """True once the vehicle has dropped below ground level."""
    return state.altitude < C.GROUND_ALTITUDE


def evaluate(state: State, config: SimulationConfig) -> LandingResult:
    """Evaluate the touchdown outcome for a terminated state."""
    return evaluate_landing(state, config)


def check_termination(state: State, max_time: float) -> Tuple[bool, Optional[str]]:
    """
    Check if simulation should terminate.

    Args:
        state: Current state
        max_time: Maximum allowed simulation time (s)

    Returns:
        (should_terminate, reason) tuple
    """
    if is_terminated(state):
        return True, "Landing complete"

    if state.t >= max_time:
        return True, "Maximum simulation time reached"

    return False, None


# =============================================================================
# TELEMETRY
# =============================================================================

def telemetry_row(state: State, phase: FlightPhase, config: SimulationConfig) -> TelemetryRow:
    """Snapshot of the state for reporting."""
    return {
        't': state.t,
        'phase': phase.name,
        'altitude': state.altitude,
        'vertical_velocity': state.vertical_velocity,
        'fuel_mass': state.fuel_mass,
        'active_engines': state.active_engines,
        'lateral_x': state.lateral_x,
        'lateral_y': state.lateral_y,
        'distance_to_beacon': distance_to_beacon(state, config),
    }


@dataclass
class SimulationLog:
    """Container for logged simulation data."""
    time: List[float] = field(default_factory=list)
    altitude: List[float] = field(default_factory=list)
    vertical_velocity: List[float] = field(default_factory=list)
    vertical_acceleration: List[float] = field(default_factory=list)
    mass: List[float] = field(default_factory=list)
    fuel_mass: List[float] = field(default_factory=list)
    active_engines: List[int] = field(default_factory=list)
    second_stage_attached: List[bool] = field(default_factory=list)
    lateral_x: List[float] = field(default_factory=list)
    lateral_y: List[float] = field(default_factory=list)
    distance_to_beacon: List[float] = field(default_factory=list)
    phase_name: List[str] = field(default_factory=list)

    def append(self, state: State, phase: FlightPhase, config: SimulationConfig):
        """Log data from current timestep."""
        self.time.append(state.t)
        self.altitude.append(state.altitude)
        self.vertical_velocity.append(state.vertical_velocity)
        self.vertical_acceleration.append(state.vertical_acceleration)
        self.mass.append(state.mass)
        self.fuel_mass.append(state.fuel_mass)
        self.active_engines.append(state.active_engines)
        self.second_stage_attached.append(state.second_stage_attached)
        self.lateral_x.append(state.lateral_x)
        self.lateral_y.append(state.lateral_y)
        self.distance_to_beacon.append(distance_to_beacon(state, config))
        self.phase_name.append(phase.name)

    def to_arrays(self) -> dict:
        """Numeric columns as numpy arrays (phase names stay a list)."""
        arrays = {
            name: np.asarray(getattr(self, name), dtype=np.float64)
            for name in ('time', 'altitude', 'vertical_velocity', 'vertical_acceleration',
                         'mass', 'fuel_mass', 'lateral_x', 'lateral_y', 'distance_to_beacon')
        }
        arrays['active_engines'] = np.asarray(self.active_engines, dtype=np.int64)
        arrays['second_stage_attached'] = np.asarray(self.second_stage_attached, dtype=bool)
        arrays['phase_name'] = list(self.phase_name)
        return arrays

    def __len__(self) -> int:
        return len(self.time)


@dataclass
class SimulationResult:
    """Summary of a completed run."""
    reason: str
    landing: Optional[LandingResult] = None
    steps: int = 0
    phase_history: List[Tuple[float, str]] = field(default_factory=list)

    @property
    def landed(self) -> bool:
        return self.landing is not None


# =============================================================================
# DRIVER LOOP
# =============================================================================

def run_simulation(config: SimulationConfig = None, initial_state: Optional[State] = None,
                   initial_phase: FlightPhase = FlightPhase.LAUNCH,
                   verbose: bool = None, realtime: bool = None) -> tuple:
    """
    Run the booster flight from the pad (or a given state) to touchdown.

    Args:
        config: SimulationConfig instance. If None a default is created.
        initial_state: Optional starting state. If None, starts on the pad.
        initial_phase: Flight phase of initial_state.
        verbose: Print progress rows. Defaults to config.verbose.
        realtime: Sleep dt of wall time per tick. Defaults to config.realtime.

    Returns:
        (final_state, log, result) tuple

    Raises:
        ValidationError: If the configuration is degenerate
    """
    if config is None:
        config = create_default_config()
    if verbose is None:
        verbose = config.verbose
    if realtime is None:
        realtime = config.realtime

    validate_config(config)

    if initial_state is not None:
        state = initial_state.copy()
    else:
        state = create_initial_state(config)

    log = SimulationLog()
    mission_mgr = MissionManager(config=config, initial_phase=initial_phase)

    logger.info(f"Starting simulation: dt={config.dt}s, max_time={config.max_time}s, "
                f"engines={config.total_engines}")
    logger.debug(f"Initial state: {state}")

    if verbose:
        _print_header(config)

    start_time = time.time()
    step_count = 0
    last_print_time = state.t
    landing = None

    while True:
        phase_before = mission_mgr.get_phase()
        state = euler_step(state, config)
        state = mission_mgr.update(state)
        phase = mission_mgr.get_phase()
        step_count += 1

        if verbose and phase != phase_before:
            _print_transition(phase)

        # Validate state
        try:
            validate_state(state, config)
        except ValidationError as e:
            logger.error(f"Validation failed: {e}")
            if verbose:
                print(f"\nValidation Error: {e}")
            reason = f"Validation failure: {e}"
            break

        log.append(state, phase, config)

        if verbose and state.t - last_print_time >= config.print_interval:
            _print_status(telemetry_row(state, phase, config))
            last_print_time = state.t

        should_terminate, reason = check_termination(state, config.max_time)
        if should_terminate:
            logger.info(f"Simulation terminated: {reason}")
            if is_terminated(state):
                landing = evaluate(state, config)
                logger.info(f"Touchdown: {landing.outcome.name}, "
                            f"distance to beacon {landing.distance:.3f}m")
            if verbose:
                print(f"\n{reason}.")
                if landing is not None:
                    print(landing.describe())
            break

        if realtime:
            time.sleep(config.dt)

    mission_mgr.terminate(state.t)
    elapsed = time.time() - start_time

    # Log final results
    _log_completion(state, step_count, elapsed, verbose)

    result = SimulationResult(
        reason=reason,
        landing=landing,
        steps=step_count,
        phase_history=list(mission_mgr.phase_history),
    )
    return state, log, result


def _print_header(config: SimulationConfig):
    print("\n" + "=" * 100)
    print(f"BOOSTER LANDING SIMULATION | dt={config.dt}s | T_max={config.max_time}s | "
          f"engines={config.total_engines}")
    print("=" * 100)
    print(f"{'Time (s)':^10} | {'Alt (m)':^12} | {'Vel (m/s)':^10} | {'Fuel (kg)':^12} | "
          f"{'X (m)':^10} | {'Y (m)':^10} | {'Phase':<10}")
    print("-" * 100)


def _print_transition(phase: FlightPhase):
    """Print a banner for a phase change."""
    if phase == FlightPhase.BOOSTBACK:
        print("Separating second stage...")
    elif phase == FlightPhase.LANDING:
        print("Reorienting for landing...")


def _print_status(row: TelemetryRow):
    """Print a formatted status row."""
    msg = (f"{row['t']:10.1f} | {row['altitude']:12.2f} | "
           f"{row['vertical_velocity']:10.2f} | {row['fuel_mass']:12.2f} | "
           f"{row['lateral_x']:10.2f} | {row['lateral_y']:10.2f} | {row['phase']:<10}")
    print(msg)
    logger.debug(msg)


def _log_completion(state: State, steps: int, elapsed: float, verbose: bool):
    """Log and print completion statistics."""
    logger.info(f"Simulation complete: {steps} steps in {elapsed:.2f}s")
    logger.info(f"Final state: {state}")

    if verbose:
        print("-" * 100)
        print("SIMULATION COMPLETED")
        print("-" * 100)
        print(f"Final Time:     {state.t:.2f} s")
        print(f"Final Altitude: {state.altitude:.2f} m")
        print(f"Final Velocity: {state.vertical_velocity:.2f} m/s")
        print(f"Final Fuel:     {state.fuel_mass:.1f} kg")
        print("-" * 100)
        print(f"Steps:       {steps:,}")
        print(f"Wall Time:   {elapsed:.2f} s")
        print(f"Performance: {steps/elapsed:.0f} steps/s" if elapsed > 0 else "Performance: N/A")
        print("=" * 100)
