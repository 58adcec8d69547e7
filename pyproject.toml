[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iohbench"
version = "0.1.0"
description = "Pseudo-Boolean benchmark problems, seeded random generators and ECDF attainment logging for optimization heuristics"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "benchmarking",
    "optimization",
    "pseudo-boolean",
    "w-model",
    "ecdf",
    "evolutionary-computation",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iohbench"]

[tool.pytest.ini_options]
addopts = "-ra"
