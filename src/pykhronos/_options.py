"""Format option strings: ``unix,ms,.3``, ``iso,.3,nodate``, ``custom:%Y...``."""

from __future__ import annotations

from typing import Any

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from pykhronos._constants import MAX_PRECISION
from pykhronos._errors import (
    ERR_MSG_INVALID_EPOCH,
    ERR_MSG_INVALID_FORMAT,
    ERR_MSG_INVALID_PRECISION,
    ERR_MSG_INVALID_UNIT,
    InvalidEpochError,
    InvalidFormatError,
    InvalidPrecisionError,
    InvalidUnitError,
)
from pykhronos._patterns import validate_pattern
from pykhronos._reader import parse_iso8601
from pykhronos.formats import (
    Custom,
    Delta,
    EpochOffset,
    InputFormat,
    Iso8601,
    Iso8601Output,
    OutputFormat,
    Unit,
    Unix,
    UnixEpoch,
    UnixMillis,
)

_INPUT_GRAMMAR = r"""
start: "unix"           -> unix
     | "unixms"         -> unix_millis
     | "iso"            -> iso8601
     | "epoch:" VALUE   -> epoch_offset
     | "custom:" VALUE  -> custom

VALUE: /.+/s
"""

_OUTPUT_GRAMMAR = r"""
start: FORMAT ("," option)*

option: PRECISION  -> precision
      | WORD       -> word

FORMAT: "iso" | "unix" | "delta"
PRECISION: /\.[0-9]+/
WORD: /[a-z]+/
"""

_input_parser = Lark(_INPUT_GRAMMAR, parser="lalr")
_output_parser = Lark(_OUTPUT_GRAMMAR, parser="lalr")

UNITS: dict[str, Unit] = {
    "s": Unit.SECONDS,
    "ms": Unit.MILLISECONDS,
    "us": Unit.MICROSECONDS,
    "ns": Unit.NANOSECONDS,
}

# Output format name -> option kinds it accepts
_ACCEPTED_OPTIONS: dict[str, set[str]] = {
    "iso": {"precision", "nodate"},
    "unix": {"unit", "precision"},
    "delta": {"unit", "precision"},
}


def parse_unit(text: str) -> Unit:
    """Parse a unit token: ``s``, ``ms``, ``us`` or ``ns``."""
    unit = UNITS.get(text)
    if unit is None:
        raise InvalidUnitError(ERR_MSG_INVALID_UNIT, f"unknown unit {text!r}")
    return unit


def parse_precision(text: str) -> int:
    """Parse a precision token such as ``.3``."""
    digits = text[1:] if text.startswith(".") else ""
    if not digits.isdigit() or not digits.isascii() or int(digits) > MAX_PRECISION:
        raise InvalidPrecisionError(
            ERR_MSG_INVALID_PRECISION,
            f"invalid precision {text!r}",
        )
    return int(digits)


class _InputTransformer(Transformer):
    def unix(self, children: list[Any]) -> InputFormat:
        return Unix()

    def unix_millis(self, children: list[Any]) -> InputFormat:
        return UnixMillis()

    def iso8601(self, children: list[Any]) -> InputFormat:
        return Iso8601()

    def epoch_offset(self, children: list[Token]) -> tuple[str, str]:
        return "epoch", str(children[0])

    def custom(self, children: list[Token]) -> tuple[str, str]:
        return "custom", str(children[0])


class _OutputTransformer(Transformer):
    def start(self, children: list[Any]) -> tuple[str, list[tuple[str, str]]]:
        name, *options = children
        return str(name), options

    def precision(self, children: list[Token]) -> tuple[str, str]:
        return "precision", str(children[0])

    def word(self, children: list[Token]) -> tuple[str, str]:
        word = str(children[0])
        if word == "nodate":
            return "nodate", word
        return "unit", word


def parse_input_format(text: str) -> InputFormat:
    """Parse an input format option string.

    Accepts ``unix``, ``unixms``, ``iso``, ``epoch:<ISO 8601 timestamp>``
    and ``custom:<strptime pattern>``.

    Raises:
        InvalidFormatError: If the format name is unknown.
        InvalidEpochError: If the epoch base is not an ISO 8601 timestamp.
        InvalidPatternError: If the custom pattern lacks a date, hour or
            minute field.
    """
    try:
        tree = _input_parser.parse(text)
    except UnexpectedInput as e:
        raise InvalidFormatError(
            ERR_MSG_INVALID_FORMAT,
            f"cannot parse input format {text!r}: {e}",
            wrapped=e,
        ) from e

    result = _InputTransformer().transform(tree)
    if not isinstance(result, tuple):
        return result

    kind, value = result
    if kind == "epoch":
        base = parse_iso8601(value)
        if base is None:
            raise InvalidEpochError(
                ERR_MSG_INVALID_EPOCH,
                f"cannot parse epoch base {value!r}",
            )
        return EpochOffset(base)

    validate_pattern(value)
    return Custom(value)


def parse_output_format(text: str) -> OutputFormat:
    """Parse an output format option string such as ``unix,ms,.3``.

    Later options override earlier ones. ``iso`` accepts a precision and
    ``nodate``; ``unix`` and ``delta`` accept a unit and a precision.

    Raises:
        InvalidFormatError: If the string is malformed or an option does not
            apply to the format.
        InvalidPrecisionError: If a precision is above ``.9``.
        InvalidUnitError: If a unit is not one of ``s``, ``ms``, ``us``, ``ns``.
    """
    try:
        tree = _output_parser.parse(text)
    except UnexpectedInput as e:
        raise InvalidFormatError(
            ERR_MSG_INVALID_FORMAT,
            f"cannot parse output format {text!r}: {e}",
            wrapped=e,
        ) from e

    name, options = _OutputTransformer().transform(tree)

    unit = Unit.SECONDS
    precision = 0
    time_only = False
    for kind, value in options:
        if kind not in _ACCEPTED_OPTIONS[name]:
            raise InvalidFormatError(
                ERR_MSG_INVALID_FORMAT,
                f"format {name!r} does not accept option {value!r}",
            )
        if kind == "unit":
            unit = parse_unit(value)
        elif kind == "precision":
            precision = parse_precision(value)
        else:
            time_only = True

    if name == "iso":
        return Iso8601Output(precision=precision, time_only=time_only)
    if name == "unix":
        return UnixEpoch(unit=unit, precision=precision)
    return Delta(unit=unit, precision=precision)
