[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "whatcrm"
version = "0.1.0"
description = "Client for the WhatCRM instances API: connections, dialogs, messages and contacts"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["whatcrm", "chat", "messaging", "api", "client", "crm"]
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
    "Topic :: Communications :: Chat",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
whatcrm = "whatcrm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["whatcrm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
