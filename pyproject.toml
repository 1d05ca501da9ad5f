[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seqdiff"
version = "0.4.0"
description = "Sequence matching and line-oriented diffs: matching blocks, opcodes, unified and context diffs, close matches."
requires-python = ">=3.10"
dependencies = []
keywords = ["diff", "text", "sequence", "matching", "unified-diff", "context-diff"]
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
    "Topic :: Text Processing :: General",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
seqdiff-demo = "seqdiff.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["seqdiff"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
