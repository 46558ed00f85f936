"""
Booster Landing Simulation - Validation Checks

This module implements sanity checks used by the driver loop:
- Configuration validity (checked once before a run)
- Fuel non-negative
- Engine count within [0, total_engines]
- Stored mass consistent with empty mass
- Finite kinematics

The simulation core never calls these; it assumes valid input. The driver
aborts the run on violation.
"""

import math
from typing import Optional, Tuple

import numpy as np

from .config import SimulationConfig
from .state import State


class ValidationError(Exception):
    """Raised when a physics validation check fails."""
    pass


def validate_config(config: SimulationConfig) -> bool:
    """
    Reject degenerate configurations before a run.

    Args:
        config: Simulation configuration

    Returns:
        True if valid, raises ValidationError otherwise
    """
    positive = {
        'dt': config.dt,
        'gravity': config.gravity,
        'empty_mass': config.empty_mass,
        'scale_height': config.scale_height,
        'max_time': config.max_time,
    }
    for name, value in positive.items():
        if not value > 0:
            raise ValidationError(f"Configuration '{name}' must be positive, got {value}")

    non_negative = {
        'initial_fuel_mass': config.initial_fuel_mass,
        'second_stage_mass': config.second_stage_mass,
        'fuel_burn_rate': config.fuel_burn_rate,
        'total_engines': config.total_engines,
        'max_thrust_per_engine': config.max_thrust_per_engine,
        'landing_tolerance': config.landing_tolerance,
        'drag_coefficient': config.drag_coefficient,
        'cross_sectional_area': config.cross_sectional_area,
        'air_density_sea_level': config.air_density_sea_level,
    }
    for name, value in non_negative.items():
        if value < 0:
            raise ValidationError(f"Configuration '{name}' must be non-negative, got {value}")

    if not isinstance(config.total_engines, int):
        raise ValidationError(
            f"Configuration 'total_engines' must be an integer, got {config.total_engines!r}"
        )
    return True


def check_fuel_valid(fuel_mass: float) -> bool:
    """
    Check that the fuel load has not gone negative.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if fuel_mass < 0.0:
        raise ValidationError(f"Negative fuel mass: {fuel_mass:.4f} kg")
    return True


def check_engine_count_valid(active_engines: int, total_engines: int) -> bool:
    """
    Check that the active engine count is within the installed count.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if not 0 <= active_engines <= total_engines:
        raise ValidationError(
            f"Active engines out of range: {active_engines} "
            f"(installed: {total_engines})"
        )
    return True


def check_mass_valid(mass: float, empty_mass: float) -> bool:
    """
    Check that stored mass never drops below the empty (dry) mass.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if mass < empty_mass * 0.99:  # Allow small numerical tolerance
        raise ValidationError(
            f"Mass below empty mass: m = {mass:.2f} kg, "
            f"empty mass = {empty_mass:.2f} kg"
        )
    return True


def check_kinematics_finite(state: State) -> bool:
    """
    Check that velocity, altitude and lateral position are finite numbers.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    values = (state.vertical_velocity, state.vertical_acceleration, state.altitude)
    if not all(math.isfinite(v) for v in values) or not np.all(np.isfinite(state.lateral)):
        raise ValidationError(f"Non-finite kinematics: {state}")
    return True


def validate_state(state: State, config: SimulationConfig,
                   abort_on_error: bool = True) -> Tuple[bool, Optional[str]]:
    """
    Run all state checks.

    Args:
        state: State to check
        config: Simulation configuration
        abort_on_error: Re-raise the first failure instead of reporting it

    Returns:
        (is_valid, error_message) tuple
    """
    try:
        check_fuel_valid(state.fuel_mass)
        check_engine_count_valid(state.active_engines, config.total_engines)
        check_mass_valid(state.mass, config.empty_mass)
        check_kinematics_finite(state)
    except ValidationError as e:
        if abort_on_error:
            raise
        return False, str(e)
    return True, None
