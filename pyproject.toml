[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spaceout"
version = "0.1.0"
description = "A small 2D space game: fly a ship between Earth, the Moon and the Sun, manage fuel and hull, and dock."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "space", "arcade", "pygame", "2d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spaceout = "spaceout.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spaceout"]

[tool.pytest.ini_options]
addopts = "-ra"
