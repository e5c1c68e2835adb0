[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "abrigos"
version = "0.1.0"
description = "Shelter connectivity analysis: shortest hops between two people, network diameter and critical shelters"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "bfs", "articulation-points", "diameter", "shelters", "geometry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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
abrigos = "abrigos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["abrigos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
