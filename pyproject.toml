[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "batalha-naval"
version = "1.0.0"
description = "Battleship board placement with diagonal ships and area abilities, rendered in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["battleship", "batalha naval", "board game", "grid"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
batalha-naval = "batalha_naval.levels:main"

[tool.hatch.build.targets.wheel]
packages = ["batalha_naval"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
