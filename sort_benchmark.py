#!/usr/bin/env python3
"""CLI entry point for the sorting benchmark.

This script provides the command-line interface for running the
sorting benchmark. It handles argument parsing, configuration validation,
harness initialization, and results display.
"""

import argparse
import logging
import os
import sys

from sort_bench.algorithms import strategy_names
from sort_bench.config import DEFAULT_LENGTH, DEFAULT_SEED, BenchmarkConfig
from sort_bench.harness import BenchmarkHarness
from sort_bench.report import print_report


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    GREEN = "\033[32m"
    CYAN = "\033[36m"
    BLUE = "\033[34m"
    YELLOW = "\033[33m"
    RED = "\033[31m"
    BOLD_RED = "\033[1;31m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colored output.

    Format: [datetime] [module] [severity] message
    - [datetime] [module]: green
    - [severity]: color depends on level
    """

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.BLUE,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        level_color = self.LEVEL_COLORS.get(record.levelno, Colors.RESET)
        datetime_str = self.formatTime(record, self.datefmt)

        green_part = f"{Colors.GREEN}[{datetime_str}] [{record.name}]{Colors.RESET}"
        severity_part = f"{level_color}[{record.levelname}]{Colors.RESET}"

        return f"{green_part} {severity_part} {record.getMessage()}"


def configure_logging():
    """Configure logging based on the LOG_LEVEL environment variable.

    Accepts DEBUG, INFO (default), WARNING, ERROR or CRITICAL. Log records
    go to stderr so they never interleave with the report on stdout.
    """
    log_level_str = os.environ.get('LOG_LEVEL', 'INFO').upper()

    log_level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL
    }

    log_level = log_level_map.get(log_level_str, logging.INFO)

    formatter = ColoredFormatter(datefmt='%Y-%m-%d %H:%M:%S')

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured with level: %s", log_level_str)

    # matplotlib is chatty about font discovery at DEBUG
    for noisy in ["matplotlib", "PIL"]:
        logging.getLogger(noisy).setLevel(logging.WARNING)

# Configure logging before creating logger
configure_logging()
logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    """Parse command-line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:]).

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description='Sorting Benchmark - Time classic sorting algorithms on identical input',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example usage:
  python sort_benchmark.py
  python sort_benchmark.py --length 2000 --seed 7
  python sort_benchmark.py --algorithm "Quick sort" --algorithm "Merge sort"
  python sort_benchmark.py --plot results/timings.png

Set LOG_LEVEL=DEBUG for detailed logging.
        """
    )

    parser.add_argument(
        '--length',
        type=int,
        default=DEFAULT_LENGTH,
        help=f'Number of elements to sort (default: {DEFAULT_LENGTH})'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=DEFAULT_SEED,
        help=f'Seed for the input generator (default: {DEFAULT_SEED})'
    )

    parser.add_argument(
        '--algorithm',
        action='append',
        default=[],
        metavar='NAME',
        help='Run only this algorithm (repeatable; default: all)'
    )

    parser.add_argument(
        '--plot',
        type=str,
        default=None,
        metavar='PATH',
        help='Save a bar chart of the timings to this image file'
    )

    parser.add_argument(
        '--list',
        action='store_true',
        help='List available algorithms and exit'
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the sorting benchmark."""
    args = parse_arguments(argv)

    if args.list:
        for name in strategy_names():
            print(name)
        sys.exit(0)

    try:
        config = BenchmarkConfig(
            length=args.length,
            seed=args.seed,
            algorithms=tuple(args.algorithm),
        )
    except ValueError as e:
        logger.error("Invalid configuration: %s", str(e))
        sys.exit(1)

    try:
        logger.info("Initializing Benchmark Harness...")
        harness = BenchmarkHarness(config)

        results = print_report(config, harness.run_all())

        if args.plot:
            # Imported lazily so plain runs do not pay for matplotlib
            from sort_bench.plotting import plot_results

            plot_results(results, args.plot,
                         title=f'Sorting {config.length} integers (seed {config.seed})')

        if not all(result.sorted for result in results):
            logger.error("One or more algorithms produced unsorted output")
            sys.exit(1)

        sys.exit(0)

    except KeyboardInterrupt:
        logger.warning("\nBenchmark interrupted by user")
        sys.exit(130)  # Standard exit code for SIGINT

    except Exception as e:
        logger.exception("Benchmark failed with error: %s", str(e))
        print("\n" + "=" * 70, file=sys.stderr)
        print("ERROR: Benchmark failed", file=sys.stderr)
        print("=" * 70, file=sys.stderr)
        print(f"\n{str(e)}\n", file=sys.stderr)
        print("Check the logs above for more details.", file=sys.stderr)
        print("=" * 70, file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
