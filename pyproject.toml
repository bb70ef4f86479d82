[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hatman"
version = "2.0.1"
description = "Game-state core of a 2D metroidvania: tags, flags, emits, timers, input, music queueing, save files, Tiled level parsing and screen transitions."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "metroidvania", "platformer", "tiled", "savegame", "game-state"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hatman"]

[tool.hatch.build.targets.sdist]
include = ["hatman", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
