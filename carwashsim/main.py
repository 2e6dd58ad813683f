"""Main entry point for the CarWashSim simulator."""

import argparse
import re
import sys
from typing import List, Optional

from carwashsim.core.sweep import SweepDriver, DEFAULT_START_DURATION
from carwashsim.reports.report_writer import ReportWriter
from carwashsim.utils.logger import setup_logger, set_level
from carwashsim.utils.visualization import plot_sweep_results
from configs import load_config, load_default_config, merge_configs

DEFAULT_MAX_MINUTES = 43200
# Values beyond a 32-bit int are treated as unparsable
MAX_INT_VALUE = 2**31 - 1

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int_prefix(value: Optional[str]) -> Optional[int]:
    """Parse the leading integer of a string.

    Returns None if there is no leading integer or it is out of range.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if not match:
        return None
    number = int(match.group(1))
    if abs(number) > MAX_INT_VALUE:
        return None
    return number


def resolve_max_minutes(value: Optional[str], default: int = DEFAULT_MAX_MINUTES) -> int:
    """Turn the -m argument into a sweep upper bound.

    Non-positive or unparsable values fall back to the default.
    """
    minutes = parse_int_prefix(value)
    if minutes is None or minutes <= 0:
        return default
    return minutes


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulate a car wash queue.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-h",
        dest="help",
        action="store_true",
        help="Show this help message and exit",
    )
    parser.add_argument(
        "-m",
        dest="minutes",
        nargs="?",
        default=None,
        help=f"Set simulation upper limit (default: {DEFAULT_MAX_MINUTES})",
    )
    parser.add_argument(
        "--config",
        nargs="?",
        default=None,
        help="Path to configuration file merged over the defaults",
    )
    parser.add_argument(
        "--seed",
        nargs="?",
        default=None,
        help="Random seed for reproducible runs",
    )
    parser.add_argument(
        "--plot-dir",
        nargs="?",
        default=None,
        help="Directory to save sweep plots",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments, ignoring anything unrecognized."""
    args, _ = build_parser().parse_known_args(argv)
    return args


def format_help(program_name: str) -> str:
    return (
        f"Usage: {program_name} [-m MINUTES] [-h]\n"
        "Simulate a car wash queue.\n"
        f"  -m MINUTES   Set simulation upper limit (default: {DEFAULT_MAX_MINUTES})\n"
        "  -h           Show this help message and exit"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main function."""
    args = parse_args(argv)

    if args.verbose:
        set_level("DEBUG")
    logger = setup_logger("CarWashSim")

    if args.help:
        print(format_help(build_parser().prog))
        return 0

    try:
        config = load_default_config()
        if args.config:
            logger.info(f"Loading configuration from {args.config}")
            config = merge_configs(config, load_config(args.config))

        sim_config = config.get('simulation', {})
        default_max = sim_config.get('max_minutes') or DEFAULT_MAX_MINUTES
        max_minutes = resolve_max_minutes(args.minutes, default_max)
        if args.minutes is not None and parse_int_prefix(args.minutes) != max_minutes:
            logger.debug(f"Using max minutes {max_minutes} for -m {args.minutes!r}")

        seed = sim_config.get('random_seed')
        if args.seed is not None:
            seed = parse_int_prefix(args.seed)
            if seed is None or seed < 0:
                logger.warning(f"Ignoring invalid seed {args.seed!r}")
                seed = None

        driver = SweepDriver(
            seed=seed,
            start_duration=sim_config.get('start_duration') or DEFAULT_START_DURATION,
        )
        results = driver.run_all(max_minutes)

        print(ReportWriter().generate_table(results))

        plot_dir = args.plot_dir or config.get('output', {}).get('plot_dir')
        if plot_dir:
            paths = plot_sweep_results(results, plot_dir)
            logger.info(f"Plots saved to {', '.join(str(p) for p in paths)}")

    except Exception as e:
        logger.error(f"Simulation failed: {str(e)}", exc_info=True)

    return 0


if __name__ == "__main__":
    sys.exit(main())
