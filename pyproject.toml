[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iirkit"
version = "0.1.0"
description = "IIR filter design pieces: biquad sections, cascades, and Butterworth/Chebyshev analogue prototypes"
requires-python = ">=3.10"
dependencies = []
keywords = ["iir", "filter", "dsp", "biquad", "butterworth", "chebyshev", "signal processing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iirkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
