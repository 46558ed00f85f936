"""
Booster Landing Simulation - Vehicle State

This module defines the single state dataclass that contains all
simulation state variables. No duplicated state is allowed anywhere.
"""

from dataclasses import dataclass, field
import numpy as np

from .config import SimulationConfig, create_default_config


@dataclass
class State:
    """
    Vehicle state for the booster simulation.

    Vertical motion is one-dimensional (altitude above the pad). The lateral
    position is tracked separately in the beacon frame.

    Attributes:
        vertical_velocity: Vertical velocity, positive up (m/s)
        vertical_acceleration: Acceleration from the last step (m/s²)
        altitude: Altitude above ground (m)
        mass: Stored vehicle mass, empty + fuel (kg)
        fuel_mass: Remaining propellant (kg)
        active_engines: Number of firing engines
        second_stage_attached: True until stage separation
        lateral: Horizontal position [x, y] (m)
        t: Simulation time (s)
    """

    vertical_velocity: float = 0.0
    vertical_acceleration: float = 0.0
    altitude: float = 0.0
    mass: float = 0.0
    fuel_mass: float = 0.0
    active_engines: int = 0
    second_stage_attached: bool = True

    # Horizontal position relative to the beacon frame origin (m)
    lateral: np.ndarray = field(default_factory=lambda: np.zeros(2))

    # Simulation time (s)
    t: float = 0.0

    def __post_init__(self):
        """Ensure lateral position is a float64 numpy array."""
        self.lateral = np.asarray(self.lateral, dtype=np.float64)
        self.vertical_velocity = float(self.vertical_velocity)
        self.vertical_acceleration = float(self.vertical_acceleration)
        self.altitude = float(self.altitude)
        self.mass = float(self.mass)
        self.fuel_mass = float(self.fuel_mass)
        self.active_engines = int(self.active_engines)
        self.t = float(self.t)

    def copy(self) -> 'State':
        """Create a deep copy of the state."""
        return State(
            vertical_velocity=self.vertical_velocity,
            vertical_acceleration=self.vertical_acceleration,
            altitude=self.altitude,
            mass=self.mass,
            fuel_mass=self.fuel_mass,
            active_engines=self.active_engines,
            second_stage_attached=self.second_stage_attached,
            lateral=self.lateral.copy(),
            t=self.t
        )

    def to_vector(self) -> np.ndarray:
        """Convert state to a flat numpy array [v, a, h, m, fuel, n, s2, x, y]."""
        return np.concatenate([
            [self.vertical_velocity, self.vertical_acceleration, self.altitude,
             self.mass, self.fuel_mass, float(self.active_engines),
             float(self.second_stage_attached)],
            self.lateral
        ])

    @property
    def lateral_x(self) -> float:
        return float(self.lateral[0])

    @property
    def lateral_y(self) -> float:
        return float(self.lateral[1])

    @property
    def has_thrust(self) -> bool:
        """True if the engines can produce thrust this tick."""
        return self.fuel_mass > 0 and self.active_engines > 0

    def __str__(self) -> str:
        """Human-readable state summary."""
        return (
            f"State(t={self.t:.2f}s, "
            f"alt={self.altitude:.2f}m, "
            f"v={self.vertical_velocity:.2f}m/s, "
            f"fuel={self.fuel_mass:.1f}kg, "
            f"engines={self.active_engines}, "
            f"x={self.lateral_x:.2f}m, y={self.lateral_y:.2f}m)"
        )


def create_initial_state(config: SimulationConfig = None) -> State:
    """
    Create the initial state for the simulation.

    Args:
        config: Simulation configuration (uses default if None)

    Returns:
        State on the pad: full tanks, all engines lit, second stage attached.
    """
    if config is None:
        config = create_default_config()
    return State(
        vertical_velocity=0.0,
        vertical_acceleration=0.0,
        altitude=0.0,
        mass=config.empty_mass + config.initial_fuel_mass,
        fuel_mass=config.initial_fuel_mass,
        active_engines=config.total_engines,
        second_stage_attached=True,
        lateral=np.array([config.initial_x, config.initial_y]),
        t=0.0
    )
