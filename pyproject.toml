[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sciantix"
version = "2.0.0"
description = "Solvers and material descriptions for modelling inert gas behaviour in a single grain of nuclear fuel"
requires-python = ">=3.10"
dependencies = []
keywords = ["nuclear fuel", "fission gas", "diffusion", "spectral solver", "materials"]
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sciantix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
