[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dottodo"
version = "0.1.0"
description = "A simple todo list manager that stores tasks in a .todo file found in the current directory or any parent"
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "tasks", "cli", "productivity"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
todo = "dottodo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dottodo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
