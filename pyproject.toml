[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kanjikey"
version = "0.1.0"
description = "Key codes for typing Japanese kana: romaji code tables, conflict checks, ergonomic ordering, residual stroke counts and terminal output helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "japanese",
    "kanji",
    "kana",
    "romaji",
    "input method",
    "keyboard layout",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kanjikey"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
