[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zappyserver"
version = "0.0.1"
description = "A tick-driven Zappy game server: toroidal world, teams, players and a line-based TCP protocol"
requires-python = ">=3.10"
keywords = ["zappy", "game", "server", "simulation", "tcp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zappyserver = "zappyserver.app:main"

[tool.hatch.build.targets.wheel]
packages = ["zappyserver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
