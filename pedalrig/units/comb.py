"""Feedback comb filter tuned to a frequency."""

from __future__ import annotations

import math
import sys
from collections import deque

from pedalrig.playhead import SAMPLE_RATE

MEM_LENGTH = 2000
INIT_FREQ = 440.0
ALPHA = 0.9


def _saturating_index(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value) or value >= sys.maxsize:
        return sys.maxsize
    return int(value)


class Comb:
    """y[n] = x[n] + ALPHA * y[n - 1 - delay], with a bounded memory."""

    def __init__(self) -> None:
        self._mem: deque[float] = deque(maxlen=MEM_LENGTH)
        self._delay = 0
        self.set_freq(INIT_FREQ)

    @property
    def delay(self) -> int:
        return self._delay

    def set_freq(self, freq: float) -> None:
        ratio = SAMPLE_RATE / freq if freq != 0 else math.inf
        self._delay = _saturating_index(ratio)

    def process(self, x: float) -> float:
        old = self._mem[self._delay] if self._delay < len(self._mem) else 0.0
        out = x + ALPHA * old
        self._mem.appendleft(out)
        return out