"""Command-line entry point.

Usage::

    trafficlog [FILE]

Reads records and queries from FILE (or standard input), writes query
results to standard output and ``Error in line N: ...`` diagnostics to
standard error.

Options::

    --motorway-category A    Category letter counted as motorway
    --other-category S       The other accepted category letter
    --encoding utf-8         Encoding of FILE
    --log-level WARNING      Root log level
    -v, --verbose            Trace every dispatched command (DEBUG)
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from typing import Any

from trafficlog import __version__
from trafficlog.config import TrafficConfig
from trafficlog.exceptions import TrafficConfigError
from trafficlog.monitor import TrafficMonitor

# Undecodable bytes become U+FFFD so the line is reported as malformed.
_INPUT_ERRORS = "replace"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trafficlog",
        description="Track car journeys on roads and report distance totals.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Input file, '-' for stdin (default)")
    parser.add_argument("--motorway-category", help="Category letter counted as motorway")
    parser.add_argument("--other-category", help="The other accepted category letter")
    parser.add_argument("--encoding", dest="input_encoding", help="Input file encoding")
    parser.add_argument("--log-level", help="Root log level (e.g. DEBUG, WARNING)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Trace every dispatched command")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    overrides: dict[str, Any] = {
        name: value
        for name, value in (
            ("motorway_category", args.motorway_category),
            ("other_category", args.other_category),
            ("input_encoding", args.input_encoding),
            ("log_level", args.log_level),
        )
        if value is not None
    }
    if args.verbose:
        overrides["trace_enabled"] = True

    try:
        config = TrafficConfig.from_env(**overrides)
    except TrafficConfigError as exc:
        print(f"trafficlog: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.effective_log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    monitor = TrafficMonitor(config)
    if args.input == "-":
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(errors=_INPUT_ERRORS)
        monitor.run(sys.stdin, sys.stdout, sys.stderr)
        return 0

    try:
        with open(args.input, encoding=config.input_encoding, errors=_INPUT_ERRORS) as handle:
            monitor.run(handle, sys.stdout, sys.stderr)
    except OSError as exc:
        print(f"trafficlog: cannot read {args.input}: {exc}", file=sys.stderr)
        return 1
    return 0
