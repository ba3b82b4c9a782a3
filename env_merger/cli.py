"""Command line interface for env-merger."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from .config_loader import DEFAULT_OUTPUT, LOG_LEVEL_ENV, MergeConfig
from .logging_utils import write_merge_report
from .merger import merge_to_file

USAGE = "Usage: env-merger -o <output-file> <input-files...>"

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Merge env files; later files override earlier ones."
    )
    parser.add_argument("inputs", nargs="*", help="Env files to merge, in precedence order")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help=f"Output file name (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML or JSON file providing inputs/output/sort_keys/report",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Write keys in sorted order instead of first-seen order",
    )
    parser.add_argument(
        "--report",
        default=None,
        help="Write an NDJSON report of inputs and overrides to this path",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        help=f"Python logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    try:
        config = MergeConfig.from_file(args.config) if args.config else MergeConfig()
    except (OSError, ValueError) as exc:
        print(f"Error loading config {args.config}: {exc}")
        return 1

    inputs = args.inputs or config.inputs
    if not inputs:
        print(USAGE)
        return 0

    output = args.output or config.output
    report = args.report or config.report
    try:
        result = merge_to_file(output, inputs, sort_keys=args.sort or config.sort_keys)
    except (OSError, ValueError) as exc:
        print(f"Error merging env files: {exc}")
        return 1

    if report:
        try:
            write_merge_report(report, result, output)
        except OSError as exc:
            print(f"Merged env written to {output}, but writing report {report} failed: {exc}")
            return 1

    logger.info(
        "Merged %d files into %s (%d keys, %d overrides)",
        len(result.inputs),
        output,
        len(result),
        len(result.overrides),
    )
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
