[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ebbgame"
version = "0.1.0"
description = "Building blocks for a tile-based role-playing game with NES-style palettes, sprites, tilemaps and save menus"
requires-python = ">=3.10"
keywords = ["game", "rpg", "nes", "tilemap", "pygame", "oam"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ebbgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
