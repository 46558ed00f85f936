"""
Booster Landing Simulation - Landing Guidance

Proportional lateral guidance toward the landing beacon. Active only during
the LANDING phase; each call applies one correction step:

    p_new = p - K * (p - p_beacon)    if |p - p_beacon| > deadband

No integral or derivative term is used.
"""

import numpy as np

from .config import SimulationConfig
from .state import State


def beacon_position(config: SimulationConfig) -> np.ndarray:
    """Beacon position [x, y] as a numpy array (m)."""
    return np.array(config.beacon, dtype=np.float64)


def compute_beacon_offset(lateral: np.ndarray, config: SimulationConfig) -> np.ndarray:
    """Vector from the beacon to the vehicle (m)."""
    return np.asarray(lateral, dtype=np.float64) - beacon_position(config)


def distance_to_beacon(state: State, config: SimulationConfig) -> float:
    """Horizontal Euclidean distance from the vehicle to the beacon (m)."""
    return float(np.linalg.norm(compute_beacon_offset(state.lateral, config)))


def compute_guidance_correction(state: State, config: SimulationConfig) -> np.ndarray:
    """
    Lateral position correction for one guidance step.

    Returns:
        Correction vector [dx, dy] (m); zero inside the deadband.
    """
    offset = compute_beacon_offset(state.lateral, config)
    if np.linalg.norm(offset) <= config.guidance_deadband:
        return np.zeros(2)
    return -config.guidance_gain * offset


def apply_guidance_correction(state: State, config: SimulationConfig) -> State:
    """
    Apply one proportional correction step toward the beacon.

    Args:
        state: Current state (not modified)
        config: Simulation configuration (gain, deadband, beacon)

    Returns:
        New state with corrected lateral position
    """
    new_state = state.copy()
    new_state.lateral = state.lateral + compute_guidance_correction(state, config)
    return new_state
