[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "golemthm"
version = "0.1.0"
description = "Constitutive relations for thermo-hydro-mechanical modelling of faulted geothermal reservoirs"
requires-python = ">=3.10"
keywords = [
    "geothermal",
    "thermo-hydro-mechanical",
    "permeability",
    "porosity",
    "plasticity",
    "hardening",
    "fluid properties",
    "SUPG",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["golemthm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
