[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bulletworm"
version = "0.1.0"
description = "Pieces of a grid-based snake game: digit strips, progress polygons, language word lists and level statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "statistics", "digits", "utf-32"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bulletworm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
