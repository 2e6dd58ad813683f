"""CarWashSim: Single-Bay Car Wash Queue Simulator."""

from .core.simulator import CarWashSimulator
from .core.sweep import SweepDriver, SweepState
from .core.simulation_result import SimulationResult
from .core.metrics_collector import MetricsCollector
from .workload.arrival_process import ArrivalProcess
from .reports.report_writer import ReportWriter
from .utils.logger import setup_logger

__version__ = "0.1.0"
__all__ = [
    "CarWashSimulator",
    "SweepDriver",
    "SweepState",
    "SimulationResult",
    "MetricsCollector",
    "ArrivalProcess",
    "ReportWriter",
    "setup_logger",
]
