[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "baconana"
version = "0.1.0"
description = "Event data records and physics-object selections for collider analyses with missing transverse energy"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "physics",
    "high-energy-physics",
    "collider",
    "event-selection",
    "lorentz-vector",
    "luminosity",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["baconana"]

[tool.pytest.ini_options]
addopts = "-ra"
