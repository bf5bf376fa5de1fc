[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calc128"
version = "0.1.0"
description = "A high-precision arithmetic expression calculator with strict input validation"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "arithmetic", "expression", "precision", "decimal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
calc128 = "calc128.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["calc128"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
