"""Result record produced by a single car wash run."""

from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one fixed-duration simulation.

    Attributes:
        duration: Minutes the car wash was open for arrivals
        total_cars: Number of cars washed
        longest_wait: Longest wait of any car, in minutes
        average_wait: Mean wait over washed cars (0.0 if none)
    """
    duration: int
    total_cars: int
    longest_wait: int
    average_wait: float

    def to_dict(self) -> Dict:
        """Plain dictionary view for reporting and plotting."""
        return asdict(self)
