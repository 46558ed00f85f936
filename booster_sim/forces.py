"""
Booster Landing Simulation - Force Computations

This module implements all force calculations along the vertical axis:
- Exponential atmosphere
- Atmospheric drag
- Thrust and weight
"""

import numpy as np

from .config import SimulationConfig
from .state import State
from .mass import compute_total_mass
from .types import ForceBreakdown


# =============================================================================
# ATMOSPHERE MODEL (isothermal exponential)
# =============================================================================

def compute_air_density(altitude: float, config: SimulationConfig) -> float:
    """
    Compute air density from the exponential atmosphere.

    rho = rho_0 * exp(-h / H)

    Negative altitudes are not clamped and return a density above sea level.

    Args:
        altitude: Altitude above sea level (m)
        config: Simulation configuration (rho_0, H)

    Returns:
        Air density (kg/m^3)
    """
    return float(config.air_density_sea_level * np.exp(-altitude / config.scale_height))


# =============================================================================
# FORCE MODELS
# =============================================================================

def compute_drag_force(velocity: float, altitude: float, config: SimulationConfig) -> float:
    """
    Compute vertical drag force.

    |F_drag| = 0.5 * Cd * rho(h) * v² * A

    Drag is negative while climbing and positive otherwise, so it always
    opposes the direction of motion.

    Args:
        velocity: Vertical velocity (m/s)
        altitude: Altitude (m)
        config: Simulation configuration (Cd, A, atmosphere)

    Returns:
        Signed drag force (N)
    """
    rho = compute_air_density(altitude, config)
    drag = 0.5 * config.drag_coefficient * rho * velocity * velocity * config.cross_sectional_area
    if velocity > 0:
        return -drag
    return drag


def compute_thrust(active_engines: int, config: SimulationConfig) -> float:
    """Total thrust of the lit engines (N)."""
    return active_engines * config.max_thrust_per_engine


def compute_forces(state: State, config: SimulationConfig) -> ForceBreakdown:
    """
    Compute the vertical force balance for the current state.

    Powered (fuel and engines available):
        F = T - m_total * g + D,  a = F / m_total
    where m_total includes the second stage while it is attached.

    Free fall:
        a = -g + D / m
    using the stored mass only.

    Args:
        state: Current vehicle state
        config: Simulation configuration

    Returns:
        ForceBreakdown with thrust, weight, drag, net force and acceleration
    """
    drag = compute_drag_force(state.vertical_velocity, state.altitude, config)

    if state.has_thrust:
        thrust = compute_thrust(state.active_engines, config)
        total_mass = compute_total_mass(state, config)
        weight = -total_mass * config.gravity
        net = thrust + weight + drag
        acceleration = net / total_mass
        powered = True
    else:
        thrust = 0.0
        total_mass = state.mass
        weight = -total_mass * config.gravity
        net = weight + drag
        acceleration = -config.gravity + drag / state.mass
        powered = False

    return {
        'powered': powered,
        'thrust': float(thrust),
        'weight': float(weight),
        'drag': float(drag),
        'net': float(net),
        'total_mass': float(total_mass),
        'acceleration': float(acceleration),
    }
