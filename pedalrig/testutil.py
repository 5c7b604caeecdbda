"""Helpers for comparing and dumping sample buffers."""

from __future__ import annotations

import struct
from collections.abc import Sequence

_F32 = struct.Struct("f")


def _to_f32(value: float) -> float:
    return _F32.unpack(_F32.pack(value))[0]


def same(a: Sequence[float], b: Sequence[float]) -> bool:
    """True when both buffers hold exactly the same samples."""
    if len(a) != len(b):
        raise ValueError(f"buffers differ in length: {len(a)} and {len(b)}")
    return all(x == y for x, y in zip(a, b))


def sum_samples(a: Sequence[float]) -> float:
    """Sum the samples with single-precision accumulation."""
    total = 0.0
    for sample in a:
        total = _to_f32(total + sample)
    return total


def format_as_source(var: str, samples: Sequence[float]) -> str:
    """Render samples as a Python list assignment named var."""
    lines = [f"{var} = ["]
    lines.extend(f"    {float(sample)!r}," for sample in samples)
    lines.append("]")
    return "\n".join(lines) + "\n"


def dump_as_source(var: str, samples: Sequence[float]) -> None:
    """Print samples as a Python list assignment named var."""
    print(format_as_source(var, samples), end="")