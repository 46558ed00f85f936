"""
Booster Landing Simulation - Dynamics Equations

This module implements the equations of motion:
- Vertical dynamics: ḧ = F_total / m
- Lateral drift: ẋ = ẏ = k * ḣ (while powered)
- Propellant: ṁ_fuel = -n * burn_rate (while powered)
"""

from typing import NamedTuple

import numpy as np

from .config import SimulationConfig
from .state import State
from .forces import compute_forces
from .mass import compute_fuel_flow_rate


class StateDerivative(NamedTuple):
    """Container for the rates the integrator applies over one step."""
    h_dot: float
    v_dot: float
    lateral_dot: np.ndarray
    fuel_dot: float
    powered: bool


def compute_lateral_rate(vertical_velocity: float, powered: bool,
                         config: SimulationConfig) -> np.ndarray:
    """
    Lateral drift rate while the engines are firing.

    Both axes drift by the same fraction of the vertical velocity; there is no
    independent horizontal force model.
    """
    if not powered:
        return np.zeros(2)
    rate = vertical_velocity * config.lateral_drift_factor
    return np.array([rate, rate])


def compute_state_derivative(state: State, config: SimulationConfig) -> StateDerivative:
    """
    Compute the state rates for one semi-implicit Euler step.

    Acceleration and fuel flow are evaluated at the current state. Altitude
    and lateral rates use the velocity after the step (v + a * dt), so
    position advances with the updated velocity.

    Args:
        state: Current vehicle state
        config: Simulation configuration

    Returns:
        StateDerivative for the step of length config.dt
    """
    forces = compute_forces(state, config)
    powered = forces['powered']
    v_dot = forces['acceleration']
    h_dot = state.vertical_velocity + v_dot * config.dt
    lateral_dot = compute_lateral_rate(h_dot, powered, config)
    fuel_dot = -compute_fuel_flow_rate(state.active_engines, config) if powered else 0.0
    return StateDerivative(h_dot, v_dot, lateral_dot, fuel_dot, powered)
