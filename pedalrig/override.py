"""A self-checking patch that plays canned input and compares the output."""

from __future__ import annotations

import time
from collections.abc import MutableSequence, Sequence
from typing import Any

from pedalrig.patch import Patch
from pedalrig.playhead import Playhead
from pedalrig.rig import NullKnobs, Rig
from pedalrig.switch import DummySwitches, Toggle


class Override(Patch):
    """Ignores the incoming audio and feeds its own canned input to a patch.

    The wrapped patch's output is written to the output block and compared
    sample by sample with the expected output.
    """

    def __init__(
        self,
        patch: Patch,
        canned_input: Sequence[float],
        expected_output: Sequence[float],
    ) -> None:
        if len(canned_input) != len(expected_output):
            raise ValueError("canned input and expected output differ in length")
        self.patch = patch
        self.canned_input = canned_input
        self.expected_output = expected_output
        self.sofar = 0
        self.mismatches = 0
        self._done = False

    def process_audio(
        self,
        input_block: Sequence[float],
        output_block: MutableSequence[float],
        knobs: Any,
        playhead: Playhead,
    ) -> None:
        left = len(self.canned_input) - self.sofar
        if left == 0:
            self._done = True
            return
        count = min(left, len(input_block))
        end = self.sofar + count
        actual = [0.0] * count
        self.patch.process_audio(
            self.canned_input[self.sofar : end], actual, knobs, playhead
        )
        for i, sample in enumerate(actual):
            output_block[i] = sample
        self.mismatches += sum(
            expected != got
            for expected, got in zip(self.expected_output[self.sofar : end], actual)
        )
        self.sofar = end

    def done(self) -> bool:
        return self._done

    def passed(self) -> bool:
        return self.mismatches == 0


def run_override(
    override: Override, rig: Rig, block_size: int, poll_seconds: float = 0.005
) -> bool:
    """Install override on rig, drive it from the callback thread, return the result."""
    rig.install_patch(override, NullKnobs(), Toggle(DummySwitches(), 0))
    rig.start_callback_thread(block_size)
    try:
        while True:
            status = rig.use(lambda s: (s.patch.done(), s.patch.passed()))
            if status is not None and status[0]:
                return status[1]
            time.sleep(poll_seconds)
    finally:
        rig.stop_callback_thread()
        rig.deinstall_patch()