"""Wait-time accumulation for a single run."""

from .simulation_result import SimulationResult


class MetricsCollector:
    """Collect wait times of washed cars.

    Only running totals are kept, so memory stays constant no matter
    how long the car wash is open.
    """

    def __init__(self):
        self.cars_washed = 0
        self.total_wait = 0
        self.max_wait = 0

    def record_wait(self, wait: int) -> None:
        """Record the wait of a car entering the wash.

        Args:
            wait: Minutes between arrival and start of service
        """
        if wait < 0:
            raise ValueError(f"Wait time cannot be negative: {wait}")

        self.cars_washed += 1
        self.total_wait += wait
        if wait > self.max_wait:
            self.max_wait = wait

    def average_wait(self) -> float:
        if self.cars_washed == 0:
            return 0.0
        return self.total_wait / self.cars_washed

    def to_result(self, duration: int) -> SimulationResult:
        """Freeze the collected totals into a result.

        Args:
            duration: Scheduled opening time of the run

        Returns:
            SimulationResult for the run
        """
        return SimulationResult(
            duration=duration,
            total_cars=self.cars_washed,
            longest_wait=self.max_wait,
            average_wait=self.average_wait(),
        )

    def get_summary(self) -> str:
        """Get human-readable summary of metrics."""
        if self.cars_washed == 0:
            return "No cars washed"

        return (
            f"Cars: {self.cars_washed}, "
            f"Average Wait: {self.average_wait():.2f} min, "
            f"Longest Wait: {self.max_wait} min"
        )
