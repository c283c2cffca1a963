[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lvpager"
version = "4.21.0"
description = "Multilingual text pager core: character set tables, Shift_JIS conversion, search-expression parsing and option handling"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "pager",
    "iso-2022",
    "shift-jis",
    "multilingual",
    "charset",
    "regular-expression",
    "search",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Natural Language :: Chinese (Traditional)",
    "Natural Language :: Japanese",
    "Natural Language :: Korean",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lvpager"]

[tool.hatch.build.targets.sdist]
include = ["lvpager", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
