[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "textrpg"
version = "1.0.0"
description = "A small turn-based text role-playing game played in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "text-adventure", "terminal", "role-playing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Korean",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
textrpg = "textrpg.game:main"

[tool.setuptools.packages.find]
include = ["textrpg*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
