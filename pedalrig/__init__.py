"""Block-based mono audio effects rig with DSP units, signals and test harnesses."""

__version__ = "0.1.0"