"""
Booster Landing Simulation - Numerical Integration

This module implements the fixed-step Euler integrator for the vertical
kinematics, lateral drift and propellant state.
"""

from .config import SimulationConfig
from .state import State
from .dynamics import compute_state_derivative
from .mass import update_fuel, compute_vehicle_mass


def euler_step(state: State, config: SimulationConfig) -> State:
    """
    Perform a single Euler integration step of length config.dt.

    Velocity is updated first and the new velocity drives position:
    v_new = v + a * dt
    h_new = h + v_new * dt

    Powered branch (fuel > 0 and engines > 0) additionally drifts the lateral
    position, burns fuel (clamped at empty) and recomputes the stored mass.
    Free-fall branch leaves lateral position, fuel and mass untouched.

    Args:
        state: Current state (not modified)
        config: Simulation configuration

    Returns:
        New state after integration
    """
    dt = config.dt
    new_state = state.copy()

    deriv = compute_state_derivative(state, config)

    new_state.vertical_acceleration = deriv.v_dot
    new_state.vertical_velocity = state.vertical_velocity + deriv.v_dot * dt
    new_state.altitude = state.altitude + deriv.h_dot * dt

    if deriv.powered:
        new_state.lateral = state.lateral + deriv.lateral_dot * dt
        new_state.fuel_mass = update_fuel(state.fuel_mass, -deriv.fuel_dot, dt)
        new_state.mass = compute_vehicle_mass(new_state.fuel_mass, config)

    new_state.t = state.t + dt
    return new_state
