[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rated1000"
version = "0.1.0"
description = "Solvers for a collection of competitive-programming problems on arrays, strings and numbers"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "greedy", "two-pointers", "puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rated1000 = "rated1000.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rated1000"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
