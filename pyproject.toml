[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drills"
version = "0.1.0"
description = "Classic algorithm drills: number puzzles, text patterns, recursion, sorting, array problems, graphs and linked lists."
requires-python = ">=3.10"
keywords = ["algorithms", "data-structures", "sorting", "linked-list", "graphs", "practice"]
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["drills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
