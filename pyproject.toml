[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gadgetkit"
version = "0.1.0"
description = "Numeric helpers and transport-agnostic drivers for small sensors, displays and memory chips"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "embedded",
    "i2c",
    "spi",
    "sensor",
    "angle",
    "fraction",
    "complex",
    "histogram",
    "eeprom",
    "fram",
    "dac",
]
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
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gadgetkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
