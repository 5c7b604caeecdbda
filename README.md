# pedalrig

`pedalrig` runs mono audio effects in fixed-size blocks, the way a pedal's
audio callback does. It also provides the building blocks of such effects.
It uses the standard library only.

## What is in it

- **Patches** (`pedalrig.patch`). A `Patch` subclass implements
  `process_audio(input_block, output_block, knobs, playhead)`. It writes one
  output sample for each input sample. The base class's `done()` and
  `passed()` raise `TypeError`; only self-checking patches answer them.
- **Playhead** (`pedalrig.playhead`). `Playhead` counts samples at 48 kHz.
  It offers `time_in_seconds()`, `sinf(hz)`, `increment_samples(n)` and
  `inc()`.
- **The rig** (`pedalrig.rig`). A `Rig` holds at most one installed patch,
  its knobs and a bypass `Toggle`. Each call to `process_audio_callback` does
  the following:
  - polls the knobs and the toggle;
  - processes the left input through the patch, or copies it through
    unchanged while bypassed;
  - copies the result to the right output;
  - advances the playhead.

  `process_audio_soft` does the same for a single mono block.
  `start_callback_thread(block_size)` and `stop_callback_thread()` run a
  background thread that keeps feeding it silence. `log()` prints the first
  samples of the last block, the frame size and the elapsed time.
  `NullKnobs` are knobs that never move.
- **Switches** (`pedalrig.switch`).
  - `Switches` is the interface for a bank of momentary switches.
  - `DummySwitches` reads a fixed set of pressed switch ids; by default none
    is pressed.
  - `Toggle` starts off and flips on each new press of its switch.
- **Test harnesses.**
  - `run_patch_on_buffer(patch, samples, block_size)` runs a whole list
    through a patch and returns the output.
  - `pedalrig.override.Override` wraps a patch. It ignores incoming audio,
    feeds canned input through the wrapped patch and counts samples that
    differ from the expected output. `run_override(override, rig, block_size)`
    drives it from the rig's callback thread until it is done and returns
    whether it passed.
  - `pedalrig.testutil` offers these helpers:
    - `same` compares two lists exactly and raises `ValueError` if their
      lengths differ;
    - `sum_samples` sums a list with single-precision accumulation;
    - `format_as_source` and `dump_as_source` render a list as a Python list
      assignment.
- **WAV simulation** (`pedalrig.sim`). `sim_main(input_file, output_file,
  patch, block_size)` reads a 16-bit mono or stereo WAV file. It pushes the
  left channel through the patch and writes a new mono WAV file with the same
  frame rate, then returns the patch. It refuses to overwrite an existing
  output file. `sample_i16_to_f32` and `sample_f32_to_i16` convert single
  samples; the latter truncates and saturates.
- **DSP units** (`pedalrig.units`).
  - `Comb`: a feedback comb filter.
  - `Reso`: a resonant filter mixed with the dry signal. Each `process` call
    prints an `update` line with its pitch slew.
  - `BandPass`, `BandPassStack` and `BandPassStackSlow`: biquad band-passes.
    `BandPassStack` covers the fundamental plus overtones 2, 3 and 5.
    `BandPassStackSlow` covers overtones 1 to 6.
  - `fast_sinh` and `biquad_params`: helpers for the band-pass filters.
- **Oscillator bank** (`pedalrig.tvob`). `TVOB` renders sines for
  (frequency, amplitude) pairs. It matches new pairs to existing `TVO`s by
  closest frequency. Unmatched oscillators fade out and new ones fade in.
- **Peak estimation** (`pedalrig.quadratic_interpolate`).
  `quadratic_interpolate(xpp, xp, x)` returns the peak position and height of
  the parabola through three samples.
- **Signals** (`pedalrig.signals`). Composable functions of time: `Sin`,
  `Const`, `ScaleTime`, `Adder`, `PostCompose`, `add` and `scale_range`.
- **SDRAM** (`pedalrig.sdram`). `SDRAM` is a bump allocator over a
  `StaticBuffer` of float32 samples. By default every `SDRAM` shares one
  64 MiB buffer. It zeroes each allocation and raises `OutOfSDRAMError` when
  the buffer is used up.
- **Timing and printing.**
  - `pedalrig.timing` offers `relative_time_ms`, `time_call` and `Timer`.
  - `pedalrig.spew` offers `spew`, `format_spew`, `format_value` and `Hex`.
    They print space-separated debug lines.

## Writing a patch

```python
from pedalrig.patch import Patch
from pedalrig.rig import run_patch_on_buffer


class Gain(Patch):
    def __init__(self, gain):
        self.gain = gain

    def process_audio(self, input_block, output_block, knobs, playhead):
        for i, sample in enumerate(input_block):
            output_block[i] = sample * self.gain


output = run_patch_on_buffer(Gain(0.5), [0.0, 0.2, 0.4, 0.6], 2)
```

## Driving a rig by hand

```python
from pedalrig.rig import NullKnobs, Rig
from pedalrig.switch import DummySwitches, Toggle

rig = Rig()
rig.install_patch(Gain(2.0), NullKnobs(), Toggle(DummySwitches(), 0))

block = [0.1, 0.2, 0.3, 0.4]
out = [0.0] * len(block)
rig.process_audio_soft(block, out)

rig.log()                      # prints the last inputs, outputs, frame size and time
patch = rig.deinstall_patch()  # hands back the installed patch
```

## DSP units

```python
from pedalrig.units.band_pass import BandPass
from pedalrig.units.comb import Comb

bp = BandPass(440.0, 0.01)   # centre frequency in Hz, bandwidth in octaves
comb = Comb()

y = comb.process(bp.process(0.5))
```

## Signals

```python
from pedalrig.signals import PostCompose, Sin, scale_range

# A sine mapped from -1..1 onto 0.3..0.9
lfo = PostCompose(Sin(), scale_range(0.3, 0.9))
value = lfo.f(1.0)
```

## What it does not do

- It ships no ready-made effect patches. You write your own `Patch`
  subclasses from the units above.
- It has no command-line program.
- It does not talk to a sound card, real knobs or real footswitches. Audio
  comes from lists or 16-bit WAV files only.

## Running the tests

Install the `test` extra, then run pytest from the project directory.