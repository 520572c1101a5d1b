[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "campusmon"
version = "0.1.0"
description = "Game state and rules for a campus monster-collecting role-playing game: backpack, storage box, healing center and sprite collision tests"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "monsters", "inventory", "collision"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["campusmon*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
