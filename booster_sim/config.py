"""
Booster Landing Simulation - Configuration

This module provides a SimulationConfig dataclass for dependency injection,
allowing different vehicle and mission parameters to be passed into the
simulation core without modifying global constants.
"""

from dataclasses import dataclass

from . import constants as C


@dataclass(frozen=True)
class SimulationConfig:
    """
    Immutable configuration for simulation parameters.

    Using frozen=True ensures configs cannot be accidentally modified.
    Create new configs via dataclass replace() if needed.

    Section grouping:
      1. Simulation timing
      2. Environment
      3. Vehicle
      4. Mission thresholds
      5. Beacon & guidance
      6. Driver / reporting
    """

    # ── 1. Simulation timing ─────────────────────────────────────────────
    dt: float = C.DT
    max_time: float = C.MAX_TIME

    # ── 2. Environment ───────────────────────────────────────────────────
    gravity: float = C.GRAVITY
    air_density_sea_level: float = C.RHO_0
    scale_height: float = C.H_SCALE

    # ── 3. Vehicle ───────────────────────────────────────────────────────
    max_thrust_per_engine: float = C.MAX_THRUST_PER_ENGINE
    empty_mass: float = C.EMPTY_MASS
    initial_fuel_mass: float = C.INITIAL_FUEL_MASS
    second_stage_mass: float = C.SECOND_STAGE_MASS
    fuel_burn_rate: float = C.FUEL_BURN_RATE
    total_engines: int = C.TOTAL_ENGINES
    drag_coefficient: float = C.DRAG_COEFFICIENT
    cross_sectional_area: float = C.CROSS_SECTIONAL_AREA

    # ── 4. Mission thresholds ────────────────────────────────────────────
    orbital_height: float = C.ORBITAL_HEIGHT
    orbital_velocity: float = C.ORBITAL_VELOCITY
    landing_throttle_altitude: float = C.LANDING_THROTTLE_ALTITUDE

    # ── 5. Beacon & guidance ─────────────────────────────────────────────
    beacon_x: float = C.BEACON_X
    beacon_y: float = C.BEACON_Y
    landing_tolerance: float = C.LANDING_TOLERANCE
    initial_x: float = C.INITIAL_X
    initial_y: float = C.INITIAL_Y
    lateral_drift_factor: float = C.LATERAL_DRIFT_FACTOR
    guidance_gain: float = C.GUIDANCE_GAIN
    guidance_deadband: float = C.GUIDANCE_DEADBAND

    # ── 6. Driver / reporting ────────────────────────────────────────────
    print_interval: float = C.PRINT_INTERVAL
    realtime: bool = False
    verbose: bool = True

    @property
    def beacon(self) -> tuple:
        """Beacon position (x, y) in metres."""
        return (self.beacon_x, self.beacon_y)


def create_default_config() -> SimulationConfig:
    """Create a SimulationConfig with default values from constants."""
    return SimulationConfig()


def create_test_config(dt: float = 0.1, max_time: float = 10.0,
                       **overrides) -> SimulationConfig:
    """Create a fast config suitable for testing.

    Any keyword arg accepted by SimulationConfig can be passed as an override.
    """
    defaults = dict(dt=dt, max_time=max_time, verbose=False)
    defaults.update(overrides)
    return SimulationConfig(**defaults)
