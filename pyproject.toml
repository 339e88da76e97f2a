[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metasmt"
version = "0.1.0"
description = "Boolean and bit-vector formula construction, bit-blasting and a built-in SAT solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["smt", "sat", "bit-vector", "bit-blasting", "cardinality", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["metasmt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
