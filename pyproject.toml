[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minefield"
version = "1.0.0"
description = "Minesweeper in a Tk desktop window, with a game engine that works without the window"
requires-python = ">=3.10"
dependencies = []
keywords = ["minesweeper", "game", "puzzle", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.gui-scripts]
minefield = "minefield.window:main"

[tool.hatch.build.targets.wheel]
packages = ["minefield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
