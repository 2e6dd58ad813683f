"""Discrete-time simulation of a single-bay car wash."""

from collections import deque
from typing import Optional

from .metrics_collector import MetricsCollector
from .simulation_result import SimulationResult
from ..workload.arrival_process import ArrivalProcess
from ..utils.logger import setup_logger


class CarWashSimulator:
    """Minute-by-minute car wash simulator.

    Each tick has two phases:
    - Arrival: while the wash is open, 0, 1 or 2 cars join the line
    - Service: the car at the front of the line is washed (one per minute)

    After closing time no new cars arrive, but the line is drained so
    every car that queued gets washed.
    """

    def __init__(self, seed: Optional[int] = None,
                 arrival_process: Optional[ArrivalProcess] = None):
        """Initialize simulator.

        Args:
            seed: Random seed for the arrival process (ignored if
                arrival_process is given)
            arrival_process: Arrival source shared by all runs
        """
        self.arrival_process = arrival_process or ArrivalProcess(seed)
        self.logger = setup_logger(self.__class__.__name__)

    def run(self, minutes: int) -> SimulationResult:
        """Run one simulation with the wash open for the given time.

        Args:
            minutes: Opening time in minutes

        Returns:
            SimulationResult for this run
        """
        if minutes < 0:
            raise ValueError(f"Simulation duration cannot be negative: {minutes}")

        car_queue = deque()
        metrics = MetricsCollector()
        current_time = 0

        while current_time < minutes or car_queue:
            if current_time < minutes:
                for _ in range(self.arrival_process.arrivals_this_minute()):
                    car_queue.append(current_time)

            if car_queue:
                arrival_time = car_queue.popleft()
                metrics.record_wait(current_time - arrival_time)

            current_time += 1

        self.logger.debug(
            f"Run of {minutes} min finished at t={current_time}: {metrics.get_summary()}"
        )

        return metrics.to_result(minutes)
