[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "idmstore"
version = "0.1.0"
description = "Typed records and repositories for a spam-moderation database, configured from a .env file"
requires-python = ">=3.10"
dependencies = [
    "python-dotenv",
]
keywords = ["database", "repository", "dotenv", "sqlite", "spam", "moderation"]
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

[project.scripts]
idmstore = "idmstore.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["idmstore"]

[tool.pytest.ini_options]
addopts = "-ra"
