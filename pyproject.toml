[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pedalrig"
version = "0.1.0"
description = "A block-based mono audio effects rig: patches, a host-side audio callback, DSP units, signals and test harnesses."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "audio",
    "dsp",
    "guitar",
    "effects",
    "pedal",
    "filter",
    "oscillator",
    "biquad",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pedalrig"]

[tool.hatch.build.targets.sdist]
include = ["pedalrig", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
