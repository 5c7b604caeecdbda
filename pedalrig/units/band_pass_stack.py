"""A band-pass on a fundamental plus three overtones, run in parallel."""

from __future__ import annotations

from pedalrig.units.band_pass import biquad_params

OVERTONE_1 = 2.0
OVERTONE_2 = 3.0
OVERTONE_3 = 5.0

_MULTIPLIERS = (1.0, OVERTONE_1, OVERTONE_2, OVERTONE_3)


class BandPassStack:
    """Sum of band-passes at freq, 2*freq, 3*freq and 5*freq sharing one input history."""

    def __init__(self, freq: float, bw: float) -> None:
        self.bw = bw
        self._freq = 0.0
        self._params: list[tuple[float, float, float, float, float]] = []
        self._x1 = self._x2 = 0.0
        self._y = [[0.0, 0.0] for _ in _MULTIPLIERS]
        self.set_freq(freq)

    @property
    def freq(self) -> float:
        return self._freq

    def set_freq(self, freq: float) -> None:
        self._params = [self.calc_params(freq * m) for m in _MULTIPLIERS]
        self._freq = freq

    def calc_params(self, freq: float) -> tuple[float, float, float, float, float]:
        """Normalised biquad coefficients for a band-pass centred on freq."""
        return biquad_params(freq, self.bw)

    def process(self, x_n: float) -> float:
        total = 0.0
        for (b0, b1, b2, a1, a2), history in zip(self._params, self._y):
            y1, y2 = history
            y_n = b0 * x_n + b1 * self._x1 + b2 * self._x2 - a1 * y1 - a2 * y2
            history[1], history[0] = y1, y_n
            total += y_n
        self._x2, self._x1 = self._x1, x_n
        return total