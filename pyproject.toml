[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "akruntime"
version = "0.1.0"
description = "Runtime support primitives: checked integers, fixed-point numbers, hash tables, byte buffers, bit helpers and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hash table",
    "fixed point",
    "checked arithmetic",
    "byte buffer",
    "bit manipulation",
    "format string",
]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["akruntime"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
