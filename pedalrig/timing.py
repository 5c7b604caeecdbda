"""Wall-clock timing helpers with millisecond resolution."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field


def relative_time_ms() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def time_call(f: Callable[[], object]) -> float:
    """Call f once and return how long it took, in seconds."""
    start = relative_time_ms()
    f()
    end = relative_time_ms()
    return (end - start) / 1000.0


@dataclass
class Timer:
    """Measures seconds elapsed since it was created."""

    start_time: int = field(default_factory=relative_time_ms)

    def elapsed(self) -> float:
        return (relative_time_ms() - self.start_time) / 1000.0