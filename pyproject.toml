[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "digipet"
version = "0.1.0"
description = "A virtual pet that hatches, grows and evolves through a tree of monsters, composed from BMP sprite sheets."
requires-python = ">=3.10"
dependencies = []
keywords = ["virtual pet", "simulation", "sprites", "bmp", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
digipet = "digipet.game:main"

[tool.hatch.build.targets.wheel]
packages = ["digipet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
