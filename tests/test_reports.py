"""Tests for the results table and plots."""

import tempfile
import unittest
from pathlib import Path

from carwashsim.core.simulation_result import SimulationResult
from carwashsim.reports.report_writer import ReportWriter
from carwashsim.utils.visualization import plot_sweep_results


class TestReportWriter(unittest.TestCase):
    """Test cases for ReportWriter."""

    def setUp(self):
        self.results = [
            SimulationResult(duration=30, total_cars=25, longest_wait=3, average_wait=1.5),
            SimulationResult(duration=60, total_cars=48, longest_wait=12, average_wait=4.256),
        ]

    def test_header_and_separator(self):
        lines = ReportWriter().generate_table(self.results).split("\n")

        self.assertEqual(
            lines[0],
            " Time (minutes)    Cars Washed   Average Wait   Longest Wait",
        )
        self.assertEqual(lines[1], "-" * 60)

    def test_rows(self):
        lines = ReportWriter().generate_table(self.results).split("\n")

        self.assertEqual(len(lines), 4)
        self.assertEqual(
            lines[2],
            "             30             25           1.50              3",
        )
        self.assertEqual(
            lines[3],
            "             60             48           4.26             12",
        )

    def test_empty_results(self):
        lines = ReportWriter().generate_table([]).split("\n")

        self.assertEqual(len(lines), 2)


class TestVisualization(unittest.TestCase):
    """Test cases for sweep plots."""

    def test_plots_written(self):
        results = [
            SimulationResult(30, 25, 3, 1.5),
            SimulationResult(60, 48, 12, 4.0),
            SimulationResult(100, 90, 20, 7.25),
        ]

        with tempfile.TemporaryDirectory() as tmp_dir:
            paths = plot_sweep_results(results, Path(tmp_dir) / "plots")

            self.assertEqual(len(paths), 2)
            for path in paths:
                self.assertTrue(path.exists())
                self.assertGreater(path.stat().st_size, 0)

    def test_no_results(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            self.assertEqual(plot_sweep_results([], tmp_dir), [])


if __name__ == '__main__':
    unittest.main()
