"""Command line front end for writing a single status line.

Usage:
    status-report --kind warning --app-name backup "disk almost full"
    python -m status_reporting "build complete"
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .config import ConfigurationError
from .logging_config import setup_logging
from .status_data_models import StatusKind
from .status_reporter import StatusReporter

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_WRITE_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="status-report",
        description="Write a timestamped status line to stdout (execution) or stderr (warning/error)",
    )
    parser.add_argument(
        "--kind",
        choices=[kind.name.lower() for kind in StatusKind],
        default=StatusKind.EXECUTION.name.lower(),
        help="Message kind (default: execution)",
    )
    parser.add_argument("--caller", default=None, help="Function or context reporting the message")
    parser.add_argument("--app-name", default=None, help="Application name shown before the label")
    parser.add_argument("--no-flush", action="store_true", help="Do not flush the stream after writing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr")
    parser.add_argument("message", nargs="*", help="Message text (joined with spaces; may be empty)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    try:
        reporter = StatusReporter(flush=False if args.no_flush else None)
    except ConfigurationError as exc:
        logger.error("Invalid status reporter configuration: %s", exc)
        return EXIT_USAGE

    result = reporter.report(args.kind, " ".join(args.message), args.caller, args.app_name)
    if not result.ok:
        logger.warning("%s", result.failure)
        return EXIT_WRITE_FAILURE
    return EXIT_OK
