"""The host that feeds audio blocks through an installed patch."""

from __future__ import annotations

import dataclasses
import threading
import time
from collections.abc import Callable, MutableSequence, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar

from pedalrig.patch import Patch
from pedalrig.playhead import Playhead
from pedalrig.spew import spew
from pedalrig.switch import DummySwitches, Toggle

T = TypeVar("T")


class NullKnobs:
    """Knobs that never move."""

    def process(self) -> None:
        pass


@dataclass
class RigState:
    """Everything the audio callback needs, plus the last block's first samples."""

    patch: Patch
    knobs: Any
    toggle: Toggle
    inl: float = 0.0
    inr: float = 0.0
    outl: float = 0.0
    outr: float = 0.0
    framesize: int = 0
    playhead: Playhead = field(default_factory=Playhead)


def _copy_into(dst: MutableSequence[float], src: Sequence[float]) -> None:
    for i, value in enumerate(src):
        dst[i] = value


class Rig:
    """Holds at most one installed patch and runs audio blocks through it.

    The callback is mono: the left input is processed, and the result is
    copied to both output channels. While the toggle is on, the patch is
    bypassed and the input is copied straight through.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._state: RigState | None = None
        self._thread: threading.Thread | None = None
        self._stop = threading.Event()

    def install_patch(self, patch: Patch, knobs: Any, toggle: Toggle) -> None:
        with self._lock:
            self._state = RigState(patch=patch, knobs=knobs, toggle=toggle)

    def deinstall_patch(self) -> Patch | None:
        """Remove the installed patch and return it, or None if there was none."""
        with self._lock:
            state, self._state = self._state, None
        return state.patch if state is not None else None

    def use(self, fn: Callable[[RigState], T]) -> T | None:
        """Call fn with the rig state under the lock; None when nothing is installed."""
        with self._lock:
            if self._state is None:
                return None
            return fn(self._state)

    def process_audio_callback(
        self,
        inputs: Sequence[Sequence[float]],
        outputs: Sequence[MutableSequence[float]],
    ) -> None:
        """Process one block given as (left, right) input and output channels."""
        left_in, right_in = inputs
        left_out, right_out = outputs
        n = len(left_in)
        if any(len(channel) != n for channel in (right_in, left_out, right_out)):
            raise ValueError("all channels of a block must have the same length")
        if n == 0:
            raise ValueError("an audio block must hold at least one sample")

        def run(state: RigState) -> None:
            state.knobs.process()
            state.toggle.process()
            if state.toggle.state:
                _copy_into(left_out, left_in)
            else:
                state.patch.process_audio(
                    left_in, left_out, state.knobs, dataclasses.replace(state.playhead)
                )
            _copy_into(right_out, left_out)
            state.inl = left_in[0]
            state.inr = right_in[0]
            state.outl = left_out[0]
            state.outr = right_out[0]
            state.framesize = n
            state.playhead.increment_samples(n)

        self.use(run)

    def process_audio_soft(
        self, input_block: Sequence[float], output_block: MutableSequence[float]
    ) -> None:
        """Process a mono block, supplying silent right channels."""
        n = len(input_block)
        self.process_audio_callback(
            [input_block, [0.0] * n], [output_block, [0.0] * n]
        )

    def start_callback_thread(self, block_size: int) -> None:
        """Keep feeding silent blocks through the patch on a background thread."""
        if block_size <= 0:
            raise ValueError("block_size must be positive")
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("callback thread is already running")
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._callback_loop, args=(block_size,), daemon=True
        )
        self._thread.start()

    def stop_callback_thread(self) -> None:
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None

    def _callback_loop(self, block_size: int) -> None:
        silence = [0.0] * block_size
        output = [0.0] * block_size
        while not self._stop.is_set():
            self.process_audio_soft(silence, output)
            time.sleep(0)

    def log(self) -> None:
        """Print the first samples and position of the last processed block."""
        snapshot = self.use(
            lambda s: (
                s.inl,
                s.inr,
                s.outl,
                s.outr,
                s.framesize,
                dataclasses.replace(s.playhead),
            )
        )
        if snapshot is None:
            snapshot = (0.0, 0.0, 0.0, 0.0, 0, Playhead())
        inl, inr, outl, outr, framesize, playhead = snapshot
        spew(
            inl,
            inr,
            outl,
            outr,
            framesize,
            playhead.time_in_samples,
            playhead.time_in_seconds(),
        )


def run_patch_on_buffer(
    patch: Patch, samples: Sequence[float], block_size: int
) -> list[float]:
    """Run samples through patch in blocks of block_size and return the output."""
    if block_size <= 0:
        raise ValueError("block_size must be positive")
    rig = Rig()
    rig.install_patch(patch, NullKnobs(), Toggle(DummySwitches(), 0))
    output: list[float] = []
    try:
        for start in range(0, len(samples), block_size):
            block = list(samples[start : start + block_size])
            out_block = [0.0] * len(block)
            rig.process_audio_soft(block, out_block)
            output.extend(out_block)
    finally:
        rig.deinstall_patch()
    return output