"""Line-by-line timestamp rewriting."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import NamedTuple

from pykhronos._patterns import PatternMatcher
from pykhronos._reader import detect_format, parse_line
from pykhronos._writer import write
from pykhronos.formats import InputFormat, OutputFormat
from pykhronos.timestamp import Timestamp

logger = logging.getLogger(__name__)


class RewrittenLine(NamedTuple):
    """Rendered timestamp, untouched remainder and the timestamp to carry forward."""

    timestamp_text: str
    remainder: str
    previous: Timestamp | None


def rewrite_line(
    line: str,
    informat: InputFormat,
    outformat: OutputFormat,
    previous: Timestamp | None = None,
    *,
    matcher: PatternMatcher | None = None,
) -> RewrittenLine:
    """Rewrite the leading timestamp of one line.

    Args:
        line: The input line without its line terminator.
        informat: How to parse the leading timestamp.
        outformat: How to render it.
        previous: The last timestamp seen on an earlier line.
        matcher: Pattern matcher for custom input formats.

    Returns:
        The rendered timestamp (empty if the line has none), the remainder
        of the line, and the previous timestamp for the next line: the one
        parsed here, or ``previous`` unchanged if none was parsed.
    """
    ts, remainder = parse_line(line, informat, matcher=matcher)
    if ts is None:
        return RewrittenLine("", remainder, previous)
    return RewrittenLine(write(outformat, ts, previous), remainder, ts)


def rewrite_lines(
    lines: Iterable[str],
    outformat: OutputFormat,
    informat: InputFormat | None = None,
    *,
    matcher: PatternMatcher | None = None,
) -> Iterator[tuple[str, str]]:
    """Rewrite a stream of lines, yielding ``(timestamp_text, remainder)`` in order.

    If ``informat`` is None the format is detected from the lines. Lines
    read before the first detection are passed through unchanged.
    """
    previous: Timestamp | None = None
    for lineno, line in enumerate(lines, 1):
        if informat is None:
            informat = detect_format(line)
            if informat is None:
                yield "", line
                continue
            logger.debug("detected input format %r on line %d", informat, lineno)

        text, remainder, previous = rewrite_line(
            line, informat, outformat, previous, matcher=matcher
        )
        yield text, remainder
