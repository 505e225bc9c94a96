[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "booktracker"
version = "0.1.0"
description = "Load a comma-separated book catalogue and choose a search field from an interactive prompt"
requires-python = ">=3.10"
dependencies = []
keywords = ["books", "catalog", "library", "cli", "text"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tracker = "booktracker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["booktracker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
