"""The interface every audio patch implements."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Patch(ABC):
    """An audio effect that turns an input block into an output block."""

    @abstractmethod
    def process_audio(self, input_block, output_block, knobs, playhead) -> None:
        """Write one processed sample into output_block for each input sample."""

    def done(self) -> bool:
        """Whether a self-checking patch has finished; most patches cannot say."""
        raise TypeError(f"{type(self).__name__} does not report completion")

    def passed(self) -> bool:
        """Whether a self-checking patch matched its expected output."""
        raise TypeError(f"{type(self).__name__} does not report a test result")