[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "homeaccounts"
version = "0.1.0"
description = "Household accounts storage: typed and segmental CSV records, plus encrypted, compressed section stores."
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = [
    "accounting",
    "household",
    "csv",
    "encryption",
    "aes-gcm",
    "sqlite",
    "storage",
]
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
    "Topic :: Office/Business :: Financial :: Accounting",
    "Topic :: Security :: Cryptography",
    "Topic :: Database",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["homeaccounts"]

[tool.hatch.build.targets.sdist]
include = [
    "homeaccounts",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"
