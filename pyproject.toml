[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knightboard"
version = "0.1.0"
description = "Chess board model with pieces, positions and move generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "board game", "move generation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["knightboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
