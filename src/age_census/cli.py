"""Command-line interface for age census."""

import argparse
import logging
import sys

from age_census.errors import CensusError
from age_census.solver import Census
from age_census.solver.execution import EXECUTOR_POLICIES
from age_census.source import DirectorySourceFactory
from age_census.source.file import DEFAULT_SUFFIX

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="age-census",
        description="Print the three most common ages across one or more regions.",
    )

    parser.add_argument(
        "data_dir",
        help="Directory holding one file of ages per region (one integer per line)",
    )

    parser.add_argument(
        "regions",
        nargs="+",
        help="Region names; each maps to <data_dir>/<region><suffix>",
    )

    parser.add_argument(
        "--suffix",
        default=DEFAULT_SUFFIX,
        help=f"File suffix for region files (default: {DEFAULT_SUFFIX})",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of parallel workers (default: number of CPUs)",
    )

    parser.add_argument(
        "--executor",
        choices=EXECUTOR_POLICIES,
        default="auto",
        help="Execution policy for multi-region scans (default: auto)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    if args.workers is not None and args.workers < 1:
        parser.error(f"--workers must be at least 1, got {args.workers}")

    census = Census(
        DirectorySourceFactory(args.data_dir, suffix=args.suffix),
        workers=args.workers,
        executor=args.executor,
    )

    try:
        if len(args.regions) == 1:
            lines = census.top3_ages(args.regions[0])
        else:
            lines = census.top3_ages_many(args.regions)
    except CensusError as exc:
        logger.error("%s", exc)
        return 1

    for line in lines:
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
