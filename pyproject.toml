[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "circuitopt"
version = "0.1.0"
description = "Turn Verilog into DOT graphs, list DOT netlists and apply simple optimisations"
requires-python = ">=3.10"
dependencies = []
keywords = ["verilog", "dot", "graphviz", "netlist", "circuit", "optimization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["circuitopt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
