[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "olakedrivers"
version = "0.1.0"
description = "Configuration, type mapping and chunk planning for MongoDB, MySQL and Postgres sync drivers"
requires-python = ">=3.10"
dependencies = [
    "pymongo",
]
keywords = ["mongodb", "mysql", "postgres", "cdc", "backfill", "chunking", "etl"]
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
    "Topic :: Database",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["olakedrivers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
