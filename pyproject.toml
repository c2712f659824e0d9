[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zflag"
version = "2.0.0"
description = "Typed values and error types for POSIX/GNU-style command-line flags: booleans, counts, bytes, complex numbers and durations"
requires-python = ">=3.10"
dependencies = []
keywords = ["flags", "command-line", "posix", "gnu", "options", "cli", "duration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zflag"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
