[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toysqlite"
version = "0.1.0"
description = "A small read-only SQLite database file reader with a minimal SELECT query engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["sqlite", "database", "btree", "sql", "query"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
toysqlite = "toysqlite.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["toysqlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
