"""Run a patch over a 16-bit WAV file and write the mono result."""

from __future__ import annotations

import math
import sys
import wave
from array import array
from collections.abc import Iterator
from pathlib import Path

from pedalrig.patch import Patch
from pedalrig.rig import NullKnobs, Rig
from pedalrig.switch import DummySwitches, Toggle

_I16_MIN = -32768
_I16_MAX = 32767


def sample_i16_to_f32(sample: int) -> float:
    return sample / 32768.0


def sample_f32_to_i16(sample: float) -> int:
    """Scale to 16 bits, truncating toward zero and saturating; NaN becomes 0."""
    if math.isnan(sample):
        return 0
    scaled = sample * 32768.0
    if scaled >= _I16_MAX:
        return _I16_MAX
    if scaled <= _I16_MIN:
        return _I16_MIN
    return int(scaled)


def _read_blocks(reader: wave.Wave_read, block_size: int) -> Iterator[list[int]]:
    channels = reader.getnchannels()
    while True:
        data = reader.readframes(block_size)
        if not data:
            return
        samples = array("h")
        samples.frombytes(data)
        if sys.byteorder == "big":
            samples.byteswap()
        yield samples[::channels].tolist()


def sim_main(
    input_file: str | Path, output_file: str | Path, patch: Patch, block_size: int
) -> Patch:
    """Process the left channel of input_file through patch into output_file.

    Returns the patch once processing is finished.
    """
    if block_size <= 0:
        raise ValueError("block_size must be positive")
    output_path = Path(output_file)
    if output_path.is_file():
        raise FileExistsError(f"output file already exists: {output_path}")

    rig = Rig()
    with wave.open(str(input_file), "rb") as reader:
        channels = reader.getnchannels()
        if channels not in (1, 2):
            raise ValueError(f"expected 1 or 2 channels, got {channels}")
        if reader.getsampwidth() != 2:
            raise ValueError("only 16-bit samples are supported")

        with wave.open(str(output_path), "wb") as writer:
            writer.setnchannels(1)
            writer.setsampwidth(2)
            writer.setframerate(reader.getframerate())

            rig.install_patch(patch, NullKnobs(), Toggle(DummySwitches(), 0))
            for block in _read_blocks(reader, block_size):
                num_frames = len(block)
                input_buf = [sample_i16_to_f32(s) for s in block]
                input_buf.extend([0.0] * (block_size - num_frames))
                output_buf = [0.0] * block_size
                rig.process_audio_soft(input_buf, output_buf)

                out = array("h", (sample_f32_to_i16(s) for s in output_buf[:num_frames]))
                if sys.byteorder == "big":
                    out.byteswap()
                writer.writeframes(out.tobytes())

    result = rig.deinstall_patch()
    if result is None:
        raise RuntimeError("patch was removed while processing")
    return result