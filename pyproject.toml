[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskbook"
version = "0.1.0"
description = "A menu-driven task manager that keeps tasks in a plain comma-separated file"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "todo", "deadlines", "priorities", "cli"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
taskbook = "taskbook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["taskbook"]

[tool.pytest.ini_options]
addopts = "-ra"
