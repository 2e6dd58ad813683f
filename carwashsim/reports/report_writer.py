"""
Report writer for sweep results - fixed-width table for the terminal.
"""
from typing import List

from ..core.simulation_result import SimulationResult

COLUMN_WIDTH = 15
TABLE_WIDTH = 60


class ReportWriter:
    """Generates the comparative results table of a sweep."""

    def generate_table(self, results: List[SimulationResult]) -> str:
        """Generate the results table.

        Args:
            results: Sweep results in schedule order

        Returns:
            Table text, one line per result after the header
        """
        lines = []
        lines.append(
            f"{'Time (minutes)':>{COLUMN_WIDTH}}"
            f"{'Cars Washed':>{COLUMN_WIDTH}}"
            f"{'Average Wait':>{COLUMN_WIDTH}}"
            f"{'Longest Wait':>{COLUMN_WIDTH}}"
        )
        lines.append("-" * TABLE_WIDTH)

        for result in results:
            lines.append(
                f"{result.duration:>{COLUMN_WIDTH}}"
                f"{result.total_cars:>{COLUMN_WIDTH}}"
                f"{result.average_wait:>{COLUMN_WIDTH}.2f}"
                f"{result.longest_wait:>{COLUMN_WIDTH}}"
            )

        return "\n".join(lines)
