"""Runs the simulator over a doubling schedule of durations."""

from enum import Enum
from typing import Callable, List, Optional

from .simulation_result import SimulationResult
from .simulator import CarWashSimulator
from ..utils.logger import setup_logger

DEFAULT_START_DURATION = 30


class SweepState(Enum):
    """States of the sweep schedule."""
    SEEDING = "seeding"
    DOUBLING = "doubling"
    CLOSING = "closing"
    DONE = "done"


class SweepDriver:
    """Run the car wash for 30, 60, 120, ... minutes up to a maximum.

    If the maximum is not itself reached by doubling, a closing run at
    exactly the maximum is added. Maximums below the start duration get
    a single run.
    """

    def __init__(self, simulator: Optional[CarWashSimulator] = None,
                 seed: Optional[int] = None,
                 start_duration: int = DEFAULT_START_DURATION):
        """Initialize sweep driver.

        Args:
            simulator: Simulator to reuse across runs
            seed: Random seed used when a simulator is created here
            start_duration: First duration of the doubling schedule
        """
        if start_duration <= 0:
            raise ValueError(f"Start duration must be positive: {start_duration}")

        self.simulator = simulator or CarWashSimulator(seed=seed)
        self.start_duration = start_duration
        self.results: List[SimulationResult] = []
        self.logger = setup_logger(self.__class__.__name__)

    def run_all(self, max_minutes: int) -> List[SimulationResult]:
        """Run the full sweep.

        Args:
            max_minutes: Upper bound of the sweep

        Returns:
            Results in schedule order
        """
        if max_minutes <= 0:
            raise ValueError(f"Maximum duration must be positive: {max_minutes}")

        self.results = []
        self.logger.info(f"Starting sweep up to {max_minutes} minutes")

        def run_once(duration: int) -> int:
            result = self.simulator.run(duration)
            self.results.append(result)
            return result.duration

        self._walk(max_minutes, run_once)

        self.logger.info(f"Sweep finished with {len(self.results)} runs")
        return self.results

    def schedule(self, max_minutes: int) -> List[int]:
        """Durations run_all would simulate, without simulating them.

        Args:
            max_minutes: Upper bound of the sweep

        Returns:
            Durations in schedule order
        """
        durations = []

        def record(duration: int) -> int:
            durations.append(duration)
            return duration

        self._walk(max_minutes, record)
        return durations

    def _walk(self, max_minutes: int, visit: Callable[[int], int]) -> None:
        """Drive the schedule state machine, calling visit for each run.

        Args:
            max_minutes: Upper bound of the sweep
            visit: Called with each duration, returns the duration run
        """
        state = SweepState.SEEDING
        duration = self.start_duration
        last_duration = None

        while state != SweepState.DONE:
            if state == SweepState.SEEDING:
                if max_minutes < self.start_duration:
                    visit(max_minutes)
                    state = SweepState.DONE
                else:
                    state = SweepState.DOUBLING

            elif state == SweepState.DOUBLING:
                if duration > max_minutes:
                    state = SweepState.CLOSING
                    continue

                last_duration = visit(duration)
                if duration <= max_minutes // 2:
                    duration *= 2
                else:
                    state = SweepState.CLOSING

            elif state == SweepState.CLOSING:
                if last_duration is None or last_duration < max_minutes:
                    last_duration = visit(max_minutes)
                state = SweepState.DONE
