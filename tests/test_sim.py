import sys
import wave
from array import array

import pytest

from pedalrig.patch import Patch
from pedalrig.sim import sample_f32_to_i16, sample_i16_to_f32, sim_main


class PassThru(Patch):
    def process_audio(self, input_block, output_block, knobs, playhead):
        for i, sample in enumerate(input_block):
            output_block[i] = sample


def _write_wav(path, channels, samples, rate=48000):
    data = array("h", samples)
    if sys.byteorder == "big":
        data.byteswap()
    with wave.open(str(path), "wb") as w:
        w.setnchannels(channels)
        w.setsampwidth(2)
        w.setframerate(rate)
        w.writeframes(data.tobytes())


def _read_wav(path):
    with wave.open(str(path), "rb") as r:
        data = array("h")
        data.frombytes(r.readframes(r.getnframes()))
        if sys.byteorder == "big":
            data.byteswap()
        return r.getnchannels(), r.getframerate(), data.tolist()


def test_sample_conversion_round_trip():
    for s in range(-32768, 32768, 97):
        assert sample_f32_to_i16(sample_i16_to_f32(s)) == s


def test_sample_conversion_limits():
    assert sample_i16_to_f32(-32768) == -1.0
    assert sample_f32_to_i16(2.0) == 32767
    assert sample_f32_to_i16(-2.0) == -32768
    assert sample_f32_to_i16(float("nan")) == 0


def test_mono_pass_through(tmp_path):
    samples = [(i * 1234) % 30000 - 15000 for i in range(23)]
    src = tmp_path / "in.wav"
    dst = tmp_path / "out.wav"
    _write_wav(src, 1, samples, rate=22050)
    patch = PassThru()
    assert sim_main(src, dst, patch, 8) is patch
    channels, rate, out = _read_wav(dst)
    assert channels == 1
    assert rate == 22050
    assert out == samples


def test_stereo_keeps_left_channel(tmp_path):
    left = [i * 100 for i in range(11)]
    interleaved = []
    for s in left:
        interleaved.extend([s, -5])
    src = tmp_path / "in.wav"
    dst = tmp_path / "out.wav"
    _write_wav(src, 2, interleaved)
    sim_main(src, dst, PassThru(), 4)
    channels, _, out = _read_wav(dst)
    assert channels == 1
    assert out == left


def test_existing_output_is_refused(tmp_path):
    src = tmp_path / "in.wav"
    dst = tmp_path / "out.wav"
    _write_wav(src, 1, [1, 2, 3])
    dst.write_bytes(b"")
    with pytest.raises(FileExistsError):
        sim_main(src, dst, PassThru(), 4)


def test_three_channels_rejected(tmp_path):
    src = tmp_path / "in.wav"
    _write_wav(src, 3, [0] * 9)
    with pytest.raises(ValueError):
        sim_main(src, tmp_path / "out.wav", PassThru(), 4)