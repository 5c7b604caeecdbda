"""Biquad band-pass filter with constant 0 dB peak gain."""

from __future__ import annotations

import math

from pedalrig.playhead import SAMPLE_RATE

_SINH_CUBIC = 0.20335755098


def fast_sinh(x: float) -> float:
    """Cubic approximation of sinh, good for small x."""
    return _SINH_CUBIC * x * x * x + x


def biquad_params(
    freq: float, bw: float, sample_rate: float = SAMPLE_RATE
) -> tuple[float, float, float, float, float]:
    """Normalised coefficients (b0, b1, b2, a1, a2) / a0 for a band-pass.

    freq is the centre frequency in Hz; bw is the bandwidth in octaves
    between the -3 dB frequencies.
    """
    w0 = 2.0 * math.pi * (freq / sample_rate)
    sin_w0 = math.sin(w0)
    if sin_w0 == 0.0:
        raise ValueError(f"no band-pass can be centred at {freq} Hz")
    alpha = sin_w0 * fast_sinh((math.log(2.0) / 2.0) * bw * (w0 / sin_w0))

    b0 = alpha
    b1 = 0.0
    b2 = -alpha
    a0 = 1.0 + alpha
    a1 = -2.0 * math.cos(w0)
    a2 = 1.0 - alpha
    return (b0 / a0, b1 / a0, b2 / a0, a1 / a0, a2 / a0)


class BandPass:
    """A single band-pass biquad whose centre can be moved while running."""

    def __init__(self, freq: float, bw: float) -> None:
        self.bw = bw
        self._freq = 0.0
        self._params = (0.0, 0.0, 0.0, 0.0, 0.0)
        self._x1 = self._x2 = 0.0
        self._y1 = self._y2 = 0.0
        self.set_freq(freq)

    @property
    def freq(self) -> float:
        return self._freq

    def set_freq(self, freq: float) -> None:
        self._params = biquad_params(freq, self.bw)
        self._freq = freq

    def process(self, x_n: float) -> float:
        b0, b1, b2, a1, a2 = self._params
        y_n = b0 * x_n + b1 * self._x1 + b2 * self._x2 - a1 * self._y1 - a2 * self._y2
        self._x2, self._x1 = self._x1, x_n
        self._y2, self._y1 = self._y1, y_n
        return y_n