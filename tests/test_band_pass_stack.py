import math

import pytest

from pedalrig.playhead import SAMPLE_RATE
from pedalrig.units.band_pass import BandPass, biquad_params
from pedalrig.units.band_pass_stack import (
    OVERTONE_1,
    OVERTONE_2,
    OVERTONE_3,
    BandPassStack,
)


def _signal(n):
    return [
        math.sin(2.0 * math.pi * 300.0 * i / SAMPLE_RATE)
        + 0.5 * math.sin(2.0 * math.pi * 1700.0 * i / SAMPLE_RATE)
        for i in range(n)
    ]


@pytest.mark.parametrize(
    "overtone, expected_freq",
    [(OVERTONE_1, 880.0), (OVERTONE_2, 1320.0), (OVERTONE_3, 2200.0)],
)
def test_overtone_params_match_fixed_multiples(overtone, expected_freq):
    stack = BandPassStack(440.0, 0.01)
    assert stack.calc_params(440.0 * overtone) == biquad_params(
        expected_freq, 0.01, SAMPLE_RATE
    )


def test_calc_params_matches_biquad_params():
    stack = BandPassStack(440.0, 0.01)
    assert stack.calc_params(880.0) == biquad_params(880.0, 0.01, SAMPLE_RATE)


def test_freq_tracks_set_freq():
    stack = BandPassStack(440.0, 0.01)
    assert stack.freq == 440.0
    stack.set_freq(220.0)
    assert stack.freq == 220.0


def test_output_is_sum_of_four_band_passes():
    freq, bw = 300.0, 0.2
    stack = BandPassStack(freq, bw)
    singles = [BandPass(freq * m, bw) for m in (1.0, 2.0, 3.0, 5.0)]
    for x in _signal(500):
        expected = sum(bp.process(x) for bp in singles)
        assert stack.process(x) == pytest.approx(expected, abs=1e-12)


def test_set_freq_equivalent_to_fresh_stack_when_silent():
    moved = BandPassStack(440.0, 0.1)
    moved.set_freq(600.0)
    fresh = BandPassStack(600.0, 0.1)
    for x in _signal(200):
        assert moved.process(x) == fresh.process(x)


def test_constant_input_decays():
    stack = BandPassStack(1000.0, 1.0)
    out = [stack.process(1.0) for _ in range(5000)]
    assert abs(out[-1]) < 1e-6