[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prettycost"
version = "0.1.0"
description = "A cost-based pretty printer with choice, flatten, align and nest combinators, plus layout benchmarks"
requires-python = ">=3.10"
dependencies = []
keywords = ["pretty-printer", "layout", "formatting", "document", "benchmark"]
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
    "Topic :: Text Processing :: General",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
prettycost = "prettycost.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["prettycost"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
