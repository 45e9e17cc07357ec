[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "turnthem"
version = "1.0.0"
description = "A small pygame arcade game with a deck of draggable weapon cards, cannons and shells."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "pygame", "cards", "cannon"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
turnthem = "turnthem.game:main"

[tool.hatch.build.targets.wheel]
packages = ["turnthem"]

[tool.pytest.ini_options]
addopts = "-ra"
