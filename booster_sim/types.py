"""
Booster Landing Simulation - Type Definitions

This module provides TypedDict definitions for structured return types,
improving type safety and IDE support.
"""

from typing import TypedDict


class ForceBreakdown(TypedDict):
    """Return type for vertical force computation details.

    All forces are signed along the vertical axis (positive up).
    """
    powered: bool  # Whether the powered branch applies this tick
    thrust: float  # Total engine thrust (N)
    weight: float  # Gravity force on the force-bearing mass, negative (N)
    drag: float  # Drag force (N)
    net: float  # Sum of thrust, weight and drag (N)
    total_mass: float  # Mass used for acceleration, incl. attached S2 (kg)
    acceleration: float  # Vertical acceleration (m/s²)


class TelemetryRow(TypedDict):
    """Return type for a single-tick telemetry snapshot."""
    t: float  # Simulation time (s)
    phase: str  # Flight phase name
    altitude: float  # Altitude (m)
    vertical_velocity: float  # Vertical velocity (m/s)
    fuel_mass: float  # Remaining fuel (kg)
    active_engines: int  # Engines firing
    lateral_x: float  # Lateral X (m)
    lateral_y: float  # Lateral Y (m)
    distance_to_beacon: float  # Horizontal distance to beacon (m)
