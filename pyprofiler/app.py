"""
Command-line profiler.

Loads the recorded performance data of an actuator from a csv-file, generates
a motion profile for the requested travel distance and writes it as csv
(`output, pos, rate, time`) to standard output or to a file.

Usage
-----
    python -m pyprofiler samples.csv --distance 5
    python -m pyprofiler --cfg profiler.toml

Command-line options take precedence over the values in the TOML
configuration file.
"""
import argparse
import sys
from pathlib import Path

from pyprofiler.core.exceptions import IngestionError, ConfigurationError
from pyprofiler.motion import SampleStore, ProfileStitcher, Trajectory
from pyprofiler.utils.config_loader import ProfilerConfig, load_profiler_config
from pyprofiler.utils.log_utils import init_logger


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pyprofiler",
        description="Generate a motion profile from recorded actuator data."
    )
    parser.add_argument(
        "sample_file",
        nargs="?",
        help="Csv-file with records 'output, pos, rate, time'"
    )
    parser.add_argument(
        "--distance", "-d",
        type=float,
        help="Travel distance of the motion profile (default: 5.0)"
    )
    parser.add_argument(
        "--cfg",
        dest="cfg_filepath",
        help="Path to a TOML configuration file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Write the profile to this file instead of standard output"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)"
    )
    args = parser.parse_args(argv)
    if args.sample_file is None and args.cfg_filepath is None:
        parser.error("a sample file or a --cfg configuration file is required.")
    return args


def build_config(args: argparse.Namespace) -> ProfilerConfig:
    if args.cfg_filepath is not None:
        config = load_profiler_config(args.cfg_filepath)
    else:
        config = ProfilerConfig()
    if args.sample_file is not None:
        config.sample_file = Path(args.sample_file)
    if args.distance is not None:
        config.distance = args.distance
    if args.log_level is not None:
        config.log_level = args.log_level
    return config


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ConfigurationError as err:
        print(f"pyprofiler: configuration error: {err}", file=sys.stderr)
        return 2

    logger = init_logger(
        "pyprofiler",
        log_file=config.log_file,
        level=config.log_level,
        console=config.log_console
    )
    try:
        store = SampleStore.from_csv(config.sample_file, logger=logger)
    except IngestionError as err:
        logger.error(f"Loading samples failed: {err}")
        print(f"pyprofiler: {err}", file=sys.stderr)
        return 1

    stitcher = ProfileStitcher(store, logger=logger)
    trajectory = Trajectory(stitcher.generate(config.distance))
    logger.info(
        f"Profile over {trajectory.distance:.6g} in {trajectory.duration:.6g} "
        f"({trajectory.accel_count} accel, {trajectory.decel_count} decel states, "
        f"top speed {trajectory.top_speed:.6g})."
    )

    if args.output:
        with open(args.output, "w", newline="", encoding="utf-8") as f:
            trajectory.write_csv(f)
    else:
        trajectory.write_csv(sys.stdout)
    return 0
