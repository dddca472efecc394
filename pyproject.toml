[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drumkit"
version = "0.1.0"
description = "Drum kit presets: instruments, channels, MIDI key mapping, validation and sampler loading"
requires-python = ">=3.10"
dependencies = []
keywords = ["drums", "midi", "sampler", "preset", "sfz"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["drumkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
