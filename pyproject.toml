[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbdet"
version = "0.1.0"
description = "Orbit determination toolkit: reference frames, time scales, ephemerides, gravity models and Kalman filter steps"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "orbit determination",
    "astrodynamics",
    "ephemeris",
    "nutation",
    "precession",
    "gravity field",
    "kalman filter",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["orbdet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
