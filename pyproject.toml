[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fp256"
version = "0.1.0"
description = "Multi-precision arithmetic on 64-bit limbs: shifts, multiplication, Montgomery arithmetic and division, with fixed-width 256-bit routines"
requires-python = ">=3.10"
keywords = ["bignum", "multiprecision", "montgomery", "modular-arithmetic", "limbs", "u256"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fp256"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
