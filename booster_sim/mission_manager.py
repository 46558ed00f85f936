"""
Booster Mission Manager

This module handles the flight-phase state machine for the booster.
It defines the discrete flight phases, the engine-count schedule for each
phase and the transition logic between them.

Transitions are one-directional:
  - LAUNCH -> BOOSTBACK:  orbital height or orbital velocity exceeded
                          (second stage separates)
  - BOOSTBACK -> LANDING: vertical velocity no longer positive
  - * -> TERMINATED:      set by the driver at touchdown, never here
"""

from enum import Enum
import logging
from typing import List, Tuple

from . import constants as C
from .config import SimulationConfig, create_default_config
from .guidance import apply_guidance_correction
from .state import State

logger = logging.getLogger(__name__)


class FlightPhase(Enum):
    LAUNCH = 0
    BOOSTBACK = 1
    LANDING = 2
    TERMINATED = 3

    def __lt__(self, other):
        if not isinstance(other, FlightPhase):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other):
        if not isinstance(other, FlightPhase):
            return NotImplemented
        return self.value <= other.value


def boostback_engine_count(config: SimulationConfig) -> int:
    """Engines lit during boostback."""
    return config.total_engines // C.BOOSTBACK_ENGINE_DIVISOR


def landing_engine_count(altitude: float, config: SimulationConfig) -> int:
    """
    Engines lit during landing.

    Above the throttle-down altitude a tenth of the engines fire; below it a
    fifteenth, but never fewer than one.
    """
    if altitude > config.landing_throttle_altitude:
        return config.total_engines // C.LANDING_ENGINE_DIVISOR
    return max(config.total_engines // C.FINAL_LANDING_ENGINE_DIVISOR, C.MIN_LANDING_ENGINES)


def _launch_complete(state: State, config: SimulationConfig) -> bool:
    return (state.altitude > config.orbital_height or
            state.vertical_velocity > config.orbital_velocity)


def advance_phase(state: State, phase: FlightPhase,
                  config: SimulationConfig) -> Tuple[State, FlightPhase]:
    """
    Advance the flight-phase state machine by one tick.

    Called once per tick after the integrator. Pure: the input state is not
    modified.

    Args:
        state: State after integration
        phase: Current flight phase
        config: Simulation configuration

    Returns:
        (new_state, new_phase) tuple
    """
    if phase == FlightPhase.LAUNCH:
        if _launch_complete(state, config):
            new_state = state.copy()
            new_state.second_stage_attached = False
            return new_state, FlightPhase.BOOSTBACK
        return state, phase

    if phase == FlightPhase.BOOSTBACK:
        new_state = state.copy()
        new_state.active_engines = boostback_engine_count(config)
        if new_state.vertical_velocity <= 0:
            return new_state, FlightPhase.LANDING
        return new_state, phase

    if phase == FlightPhase.LANDING:
        new_state = state.copy()
        new_state.active_engines = landing_engine_count(new_state.altitude, config)
        return apply_guidance_correction(new_state, config), phase

    return state, phase


class MissionManager:
    """
    Tracks the current flight phase for the driver loop and logs transitions.
    """

    def __init__(self, config: SimulationConfig = None,
                 initial_phase: FlightPhase = FlightPhase.LAUNCH):
        self.config = config or create_default_config()
        self.current_phase = initial_phase
        self.separation_time = None
        self.landing_start_time = None
        self.touchdown_time = None
        self.phase_history: List[Tuple[float, str]] = [(0.0, initial_phase.name)]

    def update(self, state: State) -> State:
        """
        Apply the phase controller to the integrated state.

        Args:
            state: State after integration

        Returns:
            State with engine count, stage flag and lateral position updated
        """
        phase_before = self.current_phase
        new_state, self.current_phase = advance_phase(state, phase_before, self.config)

        if self.current_phase != phase_before:
            self._record_transition(new_state, phase_before)
        return new_state

    def _record_transition(self, state: State, phase_before: FlightPhase):
        self.phase_history.append((state.t, self.current_phase.name))

        if self.current_phase == FlightPhase.BOOSTBACK:
            self.separation_time = state.t
            logger.info(f"Separating second stage at t={state.t:.2f}s, "
                        f"Alt={state.altitude/1000:.1f}km, "
                        f"V={state.vertical_velocity:.0f}m/s")
        elif self.current_phase == FlightPhase.LANDING:
            self.landing_start_time = state.t
            logger.info(f"Reorienting for landing at t={state.t:.2f}s, "
                        f"Alt={state.altitude/1000:.1f}km, "
                        f"Fuel={state.fuel_mass:.0f}kg")
        else:
            logger.debug(f"Phase {phase_before.name} -> {self.current_phase.name} "
                         f"at t={state.t:.2f}s")

    def terminate(self, t: float):
        """Mark the run as finished (touchdown or time limit)."""
        if self.current_phase != FlightPhase.TERMINATED:
            self.touchdown_time = t
            self.current_phase = FlightPhase.TERMINATED
            self.phase_history.append((t, FlightPhase.TERMINATED.name))

    def get_phase(self) -> FlightPhase:
        return self.current_phase
