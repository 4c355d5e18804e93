[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quizline"
version = "0.1.0"
description = "Logic for interactive terminal prompts: grapheme-aware line editing, key-to-action mapping, answer parsing, validation and formatting, and yes/no confirmation prompts."
requires-python = ">=3.10"
keywords = ["cli", "prompt", "question", "interactive", "terminal", "input"]
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
    "Topic :: Software Development :: User Interfaces",
]
dependencies = [
    "regex",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["quizline"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
