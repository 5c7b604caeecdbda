"""Time-varying oscillator bank.

Each frame the bank is given (frequency, amplitude) pairs and renders sine
waves for them. Continuity is kept by matching each new pair to an existing
oscillator; unmatched oscillators fade out and new ones fade in.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from pedalrig.playhead import SAMPLE_RATE


def clip_delta(a: float, b: float, limit: float) -> float:
    """The step from a toward b, no larger in size than limit."""
    if b > a:
        return min(b - a, limit)
    return -min(a - b, limit)


class TVO:
    """A sine oscillator whose frequency and amplitude slew toward targets."""

    def __init__(
        self,
        max_frequency_delta: float,
        max_amplitude_delta: float,
        frequency: float,
        amplitude: float,
        target_amplitude: float,
    ) -> None:
        self.max_frequency_delta = max_frequency_delta
        self.max_amplitude_delta = max_amplitude_delta
        self.phase = 0.0
        self.frequency = frequency
        self.amplitude = amplitude
        self.target_frequency = frequency
        self.target_amplitude = target_amplitude
        self.ramping_down = False

    def __repr__(self) -> str:
        return f"({self.frequency}, {self.amplitude})"

    def update_targets(self, target_frequency: float, target_amplitude: float) -> None:
        self.target_frequency = target_frequency
        self.target_amplitude = target_amplitude

    def next_sample(self) -> float:
        self._update_freq_amp()
        self.phase += self.frequency / SAMPLE_RATE
        return math.sin(self.phase * 2.0 * math.pi) * self.amplitude

    def _update_freq_amp(self) -> None:
        self.frequency += clip_delta(
            self.frequency, self.target_frequency, self.max_frequency_delta
        )
        self.amplitude += clip_delta(
            self.amplitude, self.target_amplitude, self.max_amplitude_delta
        )

    def to_zero(self) -> None:
        """Start fading out; the oscillator is done once silent."""
        self.target_amplitude = 0.0
        self.ramping_down = True

    def is_done(self) -> bool:
        return self.amplitude <= 0.0 and self.ramping_down


@dataclass
class MatchResult:
    """Index pairs (before, after), dropped before indices, new after indices."""

    matches: list[tuple[int, int]] = field(default_factory=list)
    removed: list[int] = field(default_factory=list)
    added: list[int] = field(default_factory=list)


def line_up(
    before: Sequence[object], bi: int, after: Sequence[object], ai: int
) -> MatchResult:
    """Pair before[bi] with after[ai] and the neighbours on each side in step."""
    result = MatchResult(matches=[(bi, ai)])

    d = -1
    while bi + d >= 0 or ai + d >= 0:
        b, a = bi + d, ai + d
        if b >= 0 and a >= 0:
            result.matches.append((b, a))
        elif b >= 0:
            result.removed.append(b)
        else:
            result.added.append(a)
        d -= 1

    d = 1
    while bi + d < len(before) or ai + d < len(after):
        b, a = bi + d, ai + d
        if b < len(before) and a < len(after):
            result.matches.append((b, a))
        elif b < len(before):
            result.removed.append(b)
        else:
            result.added.append(a)
        d += 1

    return result


def closest_freq(
    before: Sequence[TVO], after: Sequence[tuple[float, float]]
) -> MatchResult | None:
    """Line up around the pair of oscillators closest in frequency; None if none."""
    best: tuple[int, int, float] | None = None
    for b_index, tvo in enumerate(before):
        for a_index, (freq, _amp) in enumerate(after):
            diff = abs(freq - tvo.frequency)
            if best is None or diff < best[2]:
                best = (b_index, a_index, diff)
    if best is None:
        return None
    return line_up(before, best[0], after, best[1])


class Matcher(enum.Enum):
    """Strategy for matching old oscillators to new frequencies."""

    CLOSEST_FREQ = "closest_freq"

    def match(
        self, before: Sequence[TVO], after: Sequence[tuple[float, float]]
    ) -> MatchResult | None:
        if self is Matcher.CLOSEST_FREQ:
            return closest_freq(before, after)
        raise ValueError(f"unknown matcher: {self}")


class TVOB:
    """A bank of TVOs kept sorted by frequency."""

    def __init__(
        self, max_frequency_delta: float, max_amplitude_delta: float, matcher: Matcher
    ) -> None:
        self.max_frequency_delta = max_frequency_delta
        self.max_amplitude_delta = max_amplitude_delta
        self.matcher = matcher
        self._oscs: list[TVO] = []

    def __repr__(self) -> str:
        return f"TVOB({self._oscs!r})"

    @property
    def oscillators(self) -> tuple[TVO, ...]:
        return tuple(self._oscs)

    def _new_osc(self, frequency: float, target_amplitude: float) -> TVO:
        return TVO(
            self.max_frequency_delta,
            self.max_amplitude_delta,
            frequency,
            0.0,
            target_amplitude,
        )

    def next_sample(self) -> float:
        return sum((osc.next_sample() for osc in self._oscs), 0.0)

    def update(self, t: int, after: Sequence[tuple[float, float]]) -> None:
        """Retarget the bank to the (frequency, amplitude) pairs in after."""
        if not self._oscs:
            self._oscs = [self._new_osc(freq, amp) for freq, amp in after]
            return

        result = self.matcher.match(self._oscs, after)
        if result is None:
            return

        for b_index, a_index in result.matches:
            freq, amp = after[a_index]
            self._oscs[b_index].update_targets(freq, amp)
        for b_index in result.removed:
            self._oscs[b_index].to_zero()
        for a_index in result.added:
            freq, amp = after[a_index]
            self._oscs.append(self._new_osc(freq, amp))

        self._sort_oscs()
        self._oscs = [osc for osc in self._oscs if not osc.is_done()]

    def _sort_oscs(self) -> None:
        if any(math.isnan(osc.frequency) for osc in self._oscs):
            raise ValueError("cannot order oscillators with a NaN frequency")
        self._oscs.sort(key=lambda osc: osc.frequency)