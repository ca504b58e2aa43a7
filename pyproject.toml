[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilequest"
version = "0.1.0"
description = "A small tile-based collect-and-escape puzzle game with an XPM image loader"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tiles", "xpm", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tilequest = "tilequest.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tilequest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
