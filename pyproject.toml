[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "horrified"
version = "0.1.0"
description = "Board, pieces and hero turns for a two-hero board game against Dracula and the Invisible Man"
requires-python = ">=3.10"
dependencies = []
keywords = ["board game", "cooperative", "monsters", "dracula"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["horrified*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
