[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tonalcore"
version = "0.1.0"
description = "Music theory primitives: pitches, notes, intervals, transposition and distance"
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "music-theory", "notes", "intervals", "transpose", "pitch"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tonalcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
