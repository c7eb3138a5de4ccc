[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dominoes"
version = "0.1.0"
description = "A two-player console game of dominoes: a person against the computer."
requires-python = ">=3.10"
dependencies = []
keywords = ["dominoes", "game", "console", "board game"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dominoes = "dominoes.game:main"

[tool.hatch.build.targets.wheel]
packages = ["dominoes"]

[tool.pytest.ini_options]
addopts = "-ra"
