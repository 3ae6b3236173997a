[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prettyterm"
version = "0.1.0"
description = "Styled terminal output: colours, themes, sections, tables, trees and spinners."
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["terminal", "ansi", "color", "rgb", "table", "tree", "spinner"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["prettyterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
