[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ultimengine"
version = "0.1.0"
description = "An ultimate tic-tac-toe engine with alpha-beta search and a terminal game"
requires-python = ">=3.10"
dependencies = []
keywords = ["ultimate tic-tac-toe", "game engine", "alpha-beta", "minimax", "board game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
ultimengine = "ultimengine.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ultimengine"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
