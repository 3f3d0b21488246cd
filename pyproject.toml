[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "isqunits"
version = "0.1.0"
description = "Dimension-checked physical quantities and units of the International System of Quantities"
requires-python = ">=3.10"
dependencies = []
keywords = ["units", "quantities", "dimensional analysis", "SI", "ISQ", "physics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["isqunits"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
