"""
Booster touchdown evaluation: distance to the landing tower and outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .config import SimulationConfig
from .guidance import distance_to_beacon
from .state import State


class LandingOutcome(Enum):
    SUCCESS = "success"
    MISS = "miss"


@dataclass(frozen=True)
class LandingResult:
    """Touchdown outcome with the horizontal miss distance (m)."""
    outcome: LandingOutcome
    distance: float

    @property
    def success(self) -> bool:
        return self.outcome is LandingOutcome.SUCCESS

    def describe(self) -> str:
        """Console summary line for the touchdown."""
        if self.success:
            return f"Success! Landed on the tower. Distance to beacon: {self.distance:.2f}m"
        return f"Missed the tower. Distance to beacon: {self.distance:.2f}m"


def evaluate_landing(state: State, config: SimulationConfig) -> LandingResult:
    """
    Evaluate the touchdown once altitude has dropped below ground.

    SUCCESS if the vehicle is within config.landing_tolerance of the beacon,
    MISS otherwise. Both carry the computed distance.
    """
    distance = distance_to_beacon(state, config)
    if distance <= config.landing_tolerance:
        return LandingResult(LandingOutcome.SUCCESS, distance)
    return LandingResult(LandingOutcome.MISS, distance)
