"""
Booster Landing Simulation Package

A fixed-step simulation of a multi-engine reusable booster: powered ascent,
second-stage separation, boostback and a guided landing on a beacon.

Modules:
    - constants: Physical constants and vehicle parameters
    - config: Immutable simulation configuration
    - state: Vehicle state dataclass
    - forces: Atmosphere, drag, thrust and weight
    - mass: Fuel burn and mass bookkeeping
    - dynamics: Vertical and lateral equations of motion
    - integrators: Euler integration step
    - mission_manager: Flight-phase state machine and engine schedule
    - guidance: Proportional lateral guidance to the beacon
    - recovery: Touchdown outcome evaluation
    - validation: Configuration and state checks
    - main: Tick boundary and simulation loop
    - plotting: Telemetry plots
"""

from .state import State, create_initial_state
from .main import (
    initialize, simulation_step, is_terminated, evaluate,
    run_simulation, SimulationLog, SimulationResult,
)
from .mission_manager import FlightPhase, MissionManager, advance_phase
from .recovery import LandingOutcome, LandingResult, evaluate_landing
from .config import SimulationConfig, create_default_config, create_test_config

__version__ = "1.0.0"

__all__ = [
    'State',
    'create_initial_state',
    'initialize',
    'simulation_step',
    'is_terminated',
    'evaluate',
    'run_simulation',
    'SimulationLog',
    'SimulationResult',
    'FlightPhase',
    'MissionManager',
    'advance_phase',
    'LandingOutcome',
    'LandingResult',
    'evaluate_landing',
    'SimulationConfig',
    'create_default_config',
    'create_test_config',
]
