"""Core simulation components."""

from .simulation_result import SimulationResult
from .simulator import CarWashSimulator
from .sweep import SweepDriver, SweepState
from .metrics_collector import MetricsCollector

__all__ = [
    "SimulationResult",
    "CarWashSimulator",
    "SweepDriver",
    "SweepState",
    "MetricsCollector",
]
