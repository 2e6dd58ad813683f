"""Tests for the command line entry point."""

import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

import yaml

from carwashsim.main import (
    DEFAULT_MAX_MINUTES,
    main,
    parse_args,
    resolve_max_minutes,
)
from configs import load_default_config, merge_configs


def run_main(argv):
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        code = main(argv)
    return code, buffer.getvalue()


class TestArgumentParsing(unittest.TestCase):
    """Test cases for argument handling."""

    def test_valid_minutes(self):
        self.assertEqual(resolve_max_minutes("25"), 25)
        self.assertEqual(resolve_max_minutes("1000"), 1000)

    def test_fallback_to_default(self):
        for value in (None, "abc", "", "0", "-5", "99999999999"):
            self.assertEqual(resolve_max_minutes(value), DEFAULT_MAX_MINUTES)

    def test_leading_integer(self):
        self.assertEqual(resolve_max_minutes("120min"), 120)

    def test_custom_default(self):
        self.assertEqual(resolve_max_minutes("nope", 500), 500)

    def test_flags(self):
        args = parse_args(["-m", "100", "-h"])

        self.assertTrue(args.help)
        self.assertEqual(args.minutes, "100")

    def test_negative_minutes_consumed(self):
        args = parse_args(["-m", "-5"])

        self.assertEqual(args.minutes, "-5")

    def test_missing_minutes_value(self):
        args = parse_args(["-m"])

        self.assertIsNone(args.minutes)

    def test_unknown_arguments_ignored(self):
        args = parse_args(["--bogus", "-x", "-m", "40"])

        self.assertEqual(args.minutes, "40")


class TestMain(unittest.TestCase):
    """Test cases for main()."""

    def test_help_skips_simulation(self):
        code, output = run_main(["-h", "-m", "100"])

        self.assertEqual(code, 0)
        self.assertTrue(output.startswith("Usage: "))
        self.assertIn("[-m MINUTES] [-h]", output)
        self.assertIn("default: 43200", output)
        self.assertNotIn("Cars Washed", output)

    def test_report_printed(self):
        code, output = run_main(["-m", "100", "--seed", "1"])
        lines = output.strip("\n").split("\n")

        self.assertEqual(code, 0)
        self.assertIn("Cars Washed", lines[0])
        self.assertEqual(lines[1], "-" * 60)
        self.assertEqual([int(line.split()[0]) for line in lines[2:]], [30, 60, 100])

    def test_seeded_output_is_reproducible(self):
        _, first = run_main(["-m", "250", "--seed", "9"])
        _, second = run_main(["-m", "250", "--seed", "9"])

        self.assertEqual(first, second)

    def test_short_window(self):
        _, output = run_main(["-m", "20", "--seed", "1"])
        lines = output.strip("\n").split("\n")

        self.assertEqual(len(lines), 3)
        self.assertEqual(int(lines[2].split()[0]), 20)

    def test_config_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            config_path = Path(tmp_dir) / "config.yaml"
            config_path.write_text(yaml.safe_dump({
                'simulation': {'max_minutes': 45, 'random_seed': 4},
            }))

            code, output = run_main(["--config", str(config_path)])

        lines = output.strip("\n").split("\n")
        self.assertEqual(code, 0)
        self.assertEqual([int(line.split()[0]) for line in lines[2:]], [30, 45])

    def test_invalid_minutes_use_config_default(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            config_path = Path(tmp_dir) / "config.yaml"
            config_path.write_text(yaml.safe_dump({
                'simulation': {'max_minutes': 25},
            }))

            _, output = run_main(["--config", str(config_path), "-m", "zero"])

        lines = output.strip("\n").split("\n")
        self.assertEqual([int(line.split()[0]) for line in lines[2:]], [25])

    def test_missing_config_exits_cleanly(self):
        code, output = run_main(["--config", "/nonexistent/config.yaml", "-m", "10"])

        self.assertEqual(code, 0)
        self.assertEqual(output, "")

    def test_plot_dir(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            code, _ = run_main(["-m", "60", "--seed", "2", "--plot-dir", tmp_dir])

            self.assertEqual(code, 0)
            self.assertTrue((Path(tmp_dir) / "wait_times.png").exists())
            self.assertTrue((Path(tmp_dir) / "throughput.png").exists())


class TestConfigs(unittest.TestCase):
    """Test cases for configuration loading."""

    def test_default_config(self):
        config = load_default_config()

        self.assertEqual(config['simulation']['max_minutes'], 43200)
        self.assertEqual(config['simulation']['start_duration'], 30)
        self.assertIsNone(config['simulation']['random_seed'])

    def test_merge_configs(self):
        merged = merge_configs(
            {'simulation': {'max_minutes': 43200, 'random_seed': None}},
            {'simulation': {'random_seed': 7}},
        )

        self.assertEqual(merged['simulation'], {'max_minutes': 43200, 'random_seed': 7})


if __name__ == '__main__':
    unittest.main()
