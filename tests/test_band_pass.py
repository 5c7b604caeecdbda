import cmath
import math

import pytest

from pedalrig.playhead import SAMPLE_RATE
from pedalrig.units.band_pass import BandPass, biquad_params, fast_sinh


def _gain(params, freq):
    b0, b1, b2, a1, a2 = params
    z = cmath.exp(-1j * 2.0 * math.pi * freq / SAMPLE_RATE)
    return abs((b0 + b1 * z + b2 * z * z) / (1.0 + a1 * z + a2 * z * z))


def test_fast_sinh_zero():
    assert fast_sinh(0.0) == 0.0


@pytest.mark.parametrize("x", [0.01, 0.1, 0.3])
def test_fast_sinh_odd_and_close_to_sinh(x):
    assert fast_sinh(-x) == -fast_sinh(x)
    assert fast_sinh(x) == pytest.approx(math.sinh(x), abs=1e-3)


def test_params_are_symmetric_band_pass():
    b0, b1, b2, _a1, _a2 = biquad_params(1000.0, 1.0, SAMPLE_RATE)
    assert b1 == 0.0
    assert b2 == -b0
    assert b0 > 0.0


@pytest.mark.parametrize("freq,bw", [(440.0, 0.01), (1000.0, 1.0), (5000.0, 0.5)])
def test_unity_gain_at_centre_and_zero_at_dc(freq, bw):
    params = biquad_params(freq, bw, SAMPLE_RATE)
    assert _gain(params, freq) == pytest.approx(1.0, abs=1e-9)
    assert _gain(params, 0.0) == pytest.approx(0.0, abs=1e-12)


def test_gain_falls_off_the_centre():
    params = biquad_params(1000.0, 0.5, SAMPLE_RATE)
    assert _gain(params, 250.0) < 0.5
    assert _gain(params, 4000.0) < 0.5


def test_zero_frequency_rejected():
    with pytest.raises(ValueError):
        BandPass(0.0, 1.0)


def test_set_freq_updates_freq():
    bp = BandPass(440.0, 0.1)
    assert bp.freq == 440.0
    bp.set_freq(880.0)
    assert bp.freq == 880.0


def test_constant_input_decays():
    bp = BandPass(1000.0, 1.0)
    out = [bp.process(1.0) for _ in range(5000)]
    assert abs(out[-1]) < 1e-6
    assert max(abs(v) for v in out) > 0.0


def test_sine_at_centre_passes_unchanged_in_amplitude():
    freq = 1000.0
    bp = BandPass(freq, 1.0)
    out = [
        bp.process(math.sin(2.0 * math.pi * freq * n / SAMPLE_RATE))
        for n in range(SAMPLE_RATE // 2)
    ]
    assert max(abs(v) for v in out[-1000:]) == pytest.approx(1.0, abs=0.01)


def test_silence_in_silence_out():
    bp = BandPass(440.0, 0.01)
    assert all(bp.process(0.0) == 0.0 for _ in range(100))