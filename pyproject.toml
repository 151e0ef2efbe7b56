[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hoardsurvivor"
version = "0.1.0"
description = "A small top-down survival arcade game: strike the enemies that close in, collect what they drop and manage a weight-limited inventory."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "survival", "pygame", "inventory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
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
hoardsurvivor = "hoardsurvivor.game:main"

[tool.hatch.build.targets.wheel]
packages = ["hoardsurvivor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
