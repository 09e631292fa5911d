"""CLI entry point: python -m sysbench_report [-f FILE] [-c | --json]"""

import argparse
import io
import logging
import sys
from typing import List, Optional, TextIO

from .formatter import OutputFormat, render
from .log import setup_logging
from .parser import parse_file, parse_lines

logger = logging.getLogger(__name__)


def _stdin_lines() -> TextIO:
    """Stdin decoded as UTF-8, with undecodable bytes replaced."""
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return sys.stdin
    return io.TextIOWrapper(buffer, encoding="utf-8", errors="replace")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sysbench-report",
        description="Summarise a sysbench report on one line (reads -f FILE or stdin)",
    )
    parser.add_argument("--file", "-f", default="", help="Read the report from FILE instead of stdin")
    fmt = parser.add_mutually_exclusive_group()
    fmt.add_argument(
        "--csv", "-c", dest="format", action="store_const",
        const=OutputFormat.CSV, help="Comma separated output",
    )
    fmt.add_argument(
        "--json", dest="format", action="store_const",
        const=OutputFormat.JSON, help="JSON output",
    )
    parser.set_defaults(format=OutputFormat.PLAIN)
    parser.add_argument("--verbose", "-v", action="store_true", help="Log skipped fields and tracebacks")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        if args.file:
            result = parse_file(args.file)
        elif sys.stdin.isatty():
            print("Error: no input from pipe and no file given with -f", file=sys.stderr)
            return 1
        else:
            logger.debug("Reading report from stdin")
            result = parse_lines(_stdin_lines())

    except OSError as e:
        source = args.file or "stdin"
        print(f"Error: could not read {source}: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    print(render(result, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
