[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "perfmgmt"
version = "0.1.0"
description = "Employee and performance review records in SQLite, with a client for a remote employee API."
requires-python = ">=3.10"
dependencies = []
keywords = ["employees", "performance review", "hr", "sqlite"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
perfmgmt = "perfmgmt.app:main"

[tool.hatch.build.targets.wheel]
packages = ["perfmgmt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
