[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tagfuzz"
version = "0.1.0"
description = "Prompt-tag text helpers and Levenshtein edit distance and alignment primitives"
requires-python = ">=3.10"
dependencies = []
keywords = ["levenshtein", "edit distance", "editops", "opcodes", "tags", "prompt"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tagfuzz"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
