"""Command line entry point: rewrite timestamps from stdin to stdout."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Iterator
from typing import IO, Any

from pykhronos._errors import KhronosError
from pykhronos._options import parse_input_format, parse_output_format
from pykhronos._rewrite import rewrite_lines

logger = logging.getLogger(__name__)

DESCRIPTION = """\
Log timestamp rewriter.

Reads lines from stdin and rewrites their timestamps. The timestamp must be
at the start of the line and separated from the message by a space or tab.
Lines whose timestamp cannot be parsed are output as-is.

If no input format is given it is detected from the input; lines are passed
through unchanged until the first recognizable timestamp.
"""

EPILOG = """\
input formats:
  iso             ISO 8601
  unix            Unix time in (fractional) seconds
  unixms          Unix time in (fractional) milliseconds
  epoch:TIME      seconds since the ISO 8601 timestamp TIME
  custom:PATTERN  strptime PATTERN; %.f matches fractional seconds

output formats:
  iso             ISO 8601. Options: precision, nodate
  unix            Unix time. Options: units, precision
  delta           Time since previous line. Options: units, precision

output options:
  precision       .0 | .1 | .2 | ... | .9
  units           s | ms | us | ns
  nodate          nodate

examples:
  unix time in milliseconds with 3 fractional digits:  -o unix,ms,.3
  delta in seconds with 6 fractional digits:           -o delta,.6
"""

_LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def _option_type(parse: Callable[[str], Any]) -> Callable[[str], Any]:
    """Adapt a format parser to an argparse ``type`` callable."""

    def convert(text: str) -> Any:
        try:
            return parse(text)
        except KhronosError as e:
            logger.debug("rejected option %r: %s", text, e.internal())
            raise argparse.ArgumentTypeError(f"{e.user_message}: {text!r}") from e

    convert.__name__ = parse.__name__
    return convert


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="khronos",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-i",
        "--informat",
        metavar="FMT",
        type=_option_type(parse_input_format),
        default=None,
        help="input format; auto-detect if not given",
    )
    parser.add_argument(
        "-o",
        "--outformat",
        metavar="FMT[,OPTION...]",
        type=_option_type(parse_output_format),
        default="iso",
        help="output format (default: iso)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log more details to stderr; repeat for debug output",
    )
    return parser


def _read_lines(stream: IO[str]) -> Iterator[str]:
    for line in stream:
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        yield line


def main(
    argv: list[str] | None = None,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
) -> int:
    """Run the rewriter; returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=_LOG_LEVELS[min(args.verbose, len(_LOG_LEVELS) - 1)],
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    logger.info("input format: %s", args.informat or "auto-detect")
    logger.info("output format: %s", args.outformat)

    for text, remainder in rewrite_lines(
        _read_lines(stdin), args.outformat, args.informat
    ):
        stdout.write(f"{text}{remainder}\n")
    stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
