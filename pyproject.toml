[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeongame"
version = "0.1.0"
description = "A small turn-based dungeon combat game: a hero party against a dragon, played in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "turn-based", "combat", "dungeon", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dungeongame = "dungeongame.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeongame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
