[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "battlefield"
version = "1.0.0"
description = "A small battle map simulation driven by a text file of commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "strategy", "battle", "commands"]
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
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
battlefield = "battlefield.game:main"

[tool.hatch.build.targets.wheel]
packages = ["battlefield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
