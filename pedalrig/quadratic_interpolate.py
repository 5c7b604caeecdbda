"""Peak estimation from three equally spaced samples."""

from __future__ import annotations

import math


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


def quadratic_interpolate(xpp: float, xp: float, x: float) -> tuple[float, float]:
    """Return (x_peak, y_peak) of the parabola through three samples.

    x_peak is measured relative to the middle sample, xp, at position 0.
    A flat curvature yields IEEE infinities or NaN rather than an error.
    """
    a = xp
    b = (x - xpp) / 2.0
    c = (x - 2.0 * xp + xpp) / 2.0
    tau = 0.0 - _divide(b, 2.0 * c)
    y_max = a - _divide(b * b, 4.0 * c)
    return tau, y_max