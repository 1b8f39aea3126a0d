[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "battleship"
version = "0.1.0"
description = "A naval battle board game with animated missiles, explosions and splash effects"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["battleship", "game", "board game", "pygame", "animation"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
battleship = "battleship.game:main"

[tool.hatch.build.targets.wheel]
packages = ["battleship"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
