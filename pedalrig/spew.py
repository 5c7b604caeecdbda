"""Debug printing of space-separated values, one line per call."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from decimal import Decimal

_U64_LIMIT = 1 << 64


@dataclass(frozen=True)
class Hex:
    """An unsigned 64-bit value that prints in lower-case hexadecimal."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value < _U64_LIMIT:
            raise ValueError(f"Hex value out of 64-bit range: {self.value}")


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_value(value: object) -> str:
    """Render one value the way a spew line shows it."""
    if isinstance(value, Hex):
        return format(value.value, "x")
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def format_spew(*args: object) -> str:
    """Build a spew line: every value followed by a single space."""
    return "".join(f"{format_value(arg)} " for arg in args)


def spew(*args: object) -> None:
    """Print the values on one line to standard output."""
    sys.stdout.write(format_spew(*args) + "\n")