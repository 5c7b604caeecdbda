"""Resonant two-pole low-pass filter with a slewed pitch."""

from __future__ import annotations

import math

from pedalrig.playhead import SAMPLE_RATE
from pedalrig.spew import spew

MAX_PITCH_DELTA_PER_SEC = 100000000000.0
MAX_PITCH_DELTA_PER_SAMPLE = MAX_PITCH_DELTA_PER_SEC / SAMPLE_RATE


def _clip_delta(a: float, b: float, limit: float) -> float:
    """Step from a toward b, no larger than limit."""
    if b > a:
        return min(b - a, limit)
    return -min(a - b, limit)


class Reso:
    """Resonant filter mixed with the dry signal by amp."""

    def __init__(self, q: float) -> None:
        self.q = q
        self.target_pitch = 450.0
        self._pitch = 450.0
        self.amp = 1.0
        self._buf0 = 0.0
        self._buf1 = 0.0

    @property
    def pitch(self) -> float:
        return self._pitch

    def set_pitch(self, target_pitch: float) -> None:
        self.target_pitch = target_pitch

    def set_amp(self, amp: float) -> None:
        self.amp = amp

    def _update(self) -> None:
        before = self._pitch
        self._pitch += _clip_delta(
            self._pitch, self.target_pitch, MAX_PITCH_DELTA_PER_SAMPLE
        )
        spew("update", before, self._pitch, self.target_pitch, MAX_PITCH_DELTA_PER_SAMPLE)

    def process(self, inp: float) -> float:
        self._update()
        oscf = 2.0 * math.sin(math.pi * (self._pitch / SAMPLE_RATE))
        fb = self.q + self.q / (1.0 - oscf)
        self._buf0 += oscf * (inp - self._buf0 + fb * (self._buf0 - self._buf1))
        self._buf1 += oscf * (self._buf0 - self._buf1)
        return self.amp * self._buf1 + (1.0 - self.amp) * inp