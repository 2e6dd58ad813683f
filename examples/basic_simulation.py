"""Basic simulation example."""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from carwashsim.core.simulator import CarWashSimulator
from carwashsim.core.sweep import SweepDriver
from carwashsim.reports.report_writer import ReportWriter
from carwashsim.utils.logger import setup_logger
from configs import load_default_config, merge_configs


def main():
    """Run a single day and a one-week sweep."""
    logger = setup_logger("BasicSimulation")

    logger.info("=== Basic Car Wash Simulation ===")

    config = merge_configs(load_default_config(), {
        'simulation': {'max_minutes': 7 * 24 * 60, 'random_seed': 42},
    })
    sim_config = config['simulation']

    # One simulator shared by both parts, so the sweep continues its stream
    simulator = CarWashSimulator(seed=sim_config['random_seed'])

    day = simulator.run(8 * 60)
    logger.info(f"8-hour day: {day.total_cars} cars washed")
    logger.info(f"  Average wait: {day.average_wait:.2f} min")
    logger.info(f"  Longest wait: {day.longest_wait} min")

    logger.info(f"\nSweeping up to {sim_config['max_minutes']} minutes")
    driver = SweepDriver(simulator=simulator,
                         start_duration=sim_config['start_duration'])
    results = driver.run_all(sim_config['max_minutes'])

    print(ReportWriter().generate_table(results))

    logger.info("\nSimulation complete!")


if __name__ == "__main__":
    main()
