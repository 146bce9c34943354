[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpsolve"
version = "0.1.0"
description = "Solvers for classic dynamic-programming and graph problems"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "dynamic-programming",
    "graphs",
    "shortest-paths",
    "segment-tree",
    "topological-sort",
]
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
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["cpsolve"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
