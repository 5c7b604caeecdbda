"""A band-pass on a fundamental and its first five overtones."""

from __future__ import annotations

from pedalrig.units.band_pass import BandPass

OVERTONES = (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)


class BandPassStackSlow:
    """Sum of independent band-passes at freq times each of OVERTONES."""

    def __init__(self, freq: float, bw: float) -> None:
        self._bps = [BandPass(freq * m, bw) for m in OVERTONES]

    @property
    def freqs(self) -> tuple[float, ...]:
        return tuple(bp.freq for bp in self._bps)

    def set_freq(self, freq: float) -> None:
        for bp, m in zip(self._bps, OVERTONES):
            bp.set_freq(freq * m)

    def process(self, x: float) -> float:
        return sum((bp.process(x) for bp in self._bps), 0.0)