[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "centiplay"
version = "0.1.0"
description = "Game logic for a Centipede-style arcade shooter: object pools, critters, spawning, scoring, high scores and HUD text"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "centipede", "object-pool", "high-scores"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["centiplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
