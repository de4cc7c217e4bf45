"""Command-line interface for hierarchy reader."""

import argparse
import logging
import sys

from hierarchy_reader.reader.cursor import HierarchyOpenError
from hierarchy_reader.reader.orchestrator import read_hierarchy
from hierarchy_reader.reader.types import MAX_READERS, ParsingStats

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
        prog="hierarchy-reader",
        description="Read a hierarchy file into a key-ordered list of entries.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the input file (one '<key> <json>' entry per line)",
    )

    parser.add_argument(
        "--readers",
        type=int,
        default=4,
        help=f"Number of concurrent readers, clamped to 1..{MAX_READERS} (default: 4)",
    )

    parser.add_argument(
        "--show",
        type=int,
        default=0,
        metavar="N",
        help="Print the first N merged entries (default: 0)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def format_stats(stats: ParsingStats) -> str:
    return (
        f"loaded={stats.num_loaded} bad_keys={stats.bad_keys} "
        f"bad_payloads={stats.bad_payloads} filtered_sentinels={stats.filtered_sentinels} "
        f"empty_lines={stats.empty_lines}"
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    if args.show < 0:
        parser.error(f"--show must be non-negative, got {args.show}")

    stats = ParsingStats()
    try:
        entries = read_hierarchy(args.input_file, args.readers, stats)
    except HierarchyOpenError as exc:
        logger.error("%s", exc)
        return 1

    for entry in entries[: args.show]:
        print(f"{entry.key}\t{entry.kind}\t{entry.name}")
    print(format_stats(stats))

    return 0


if __name__ == "__main__":
    sys.exit(main())
