[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonrl"
version = "0.1.0"
description = "Core of a turn-based dungeon crawler: tile map, entity components, turn systems and a character-cell console model."
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "game", "dungeon", "entity-component-system", "turn-based"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dungeonrl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
