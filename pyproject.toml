[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacesim"
version = "0.1.0"
description = "A space simulation with a pygame main menu and a sector/quadrant/system universe model"
requires-python = ">=3.10"
keywords = ["game", "space", "simulation", "pygame", "universe"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spacesim = "spacesim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spacesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
