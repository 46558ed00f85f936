"""
Booster Landing Simulation - Fuel burn and mass bookkeeping.
"""

from .config import SimulationConfig


def compute_fuel_flow_rate(active_engines: int, config: SimulationConfig) -> float:
    """
    Compute propellant consumption rate (kg/s, positive while burning).
    """
    if active_engines <= 0:
        return 0.0
    return active_engines * config.fuel_burn_rate


def compute_fuel_consumed(fuel_mass: float, flow_rate: float, dt: float) -> float:
    """
    Fuel burned over one step, clamped to what is left in the tanks.
    """
    return min(flow_rate * dt, fuel_mass)


def update_fuel(fuel_mass: float, flow_rate: float, dt: float) -> float:
    """
    Euler update for fuel mass. Never returns a negative value.
    """
    return fuel_mass - compute_fuel_consumed(fuel_mass, flow_rate, dt)


def compute_vehicle_mass(fuel_mass: float, config: SimulationConfig) -> float:
    """
    Stored vehicle mass: empty mass plus remaining fuel.

    The second stage is deliberately not included here; it only enters the
    force balance through compute_total_mass().
    """
    return config.empty_mass + fuel_mass


def compute_total_mass(state, config: SimulationConfig) -> float:
    """
    Force-bearing mass: stored mass plus the second stage while attached.
    """
    if state.second_stage_attached:
        return state.mass + config.second_stage_mass
    return state.mass
