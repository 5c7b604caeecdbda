"""Running sample clock for an audio stream."""

from __future__ import annotations

import math
from dataclasses import dataclass

SAMPLE_RATE = 48000


@dataclass
class Playhead:
    """Counts samples processed so far and converts them to time."""

    sample_rate: int = SAMPLE_RATE
    time_in_samples: int = 0

    def time_in_seconds(self) -> float:
        return self.time_in_samples / self.sample_rate

    def sinf(self, hz: float) -> float:
        """Value of a sine of frequency hz at the current time."""
        return math.sin(self.time_in_seconds() * hz * 2.0 * math.pi)

    def increment_samples(self, delta_samples: int) -> None:
        if delta_samples < 0:
            raise ValueError("delta_samples must not be negative")
        self.time_in_samples += delta_samples

    def inc(self) -> None:
        self.increment_samples(1)