[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "forestfire"
version = "0.1.0"
description = "Grid simulation of a spreading forest fire and an animal fleeing it"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "forest fire", "cellular automaton", "grid", "wind"]
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
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
forestfire = "forestfire.program:main"

[tool.hatch.build.targets.wheel]
packages = ["forestfire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
