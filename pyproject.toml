[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oedoana"
version = "0.1.0"
description = "Event-level analysis routines for OEDO beamline detectors: FADC decoding, timing, TOF, PID, PPAC, ion chamber, TINA and DALI reconstruction"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "nuclear physics",
    "beamline",
    "particle identification",
    "time of flight",
    "ppac",
    "fadc",
    "detector analysis",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oedoana"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
