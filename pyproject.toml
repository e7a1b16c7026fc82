[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dpkit"
version = "0.1.0"
description = "Classic dynamic-programming solutions: grid paths, subsets, subsequences and stock trading"
requires-python = ">=3.10"
dependencies = []
keywords = ["dynamic-programming", "algorithms", "memoization", "tabulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["dpkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
