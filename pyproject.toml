[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zerod"
version = "0.1.0"
description = "A small non-blocking TCP listening server that accepts and tracks connections, with timestamped logging"
requires-python = ">=3.10"
dependencies = []
keywords = ["server", "tcp", "selectors", "networking", "sockets"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: No Input/Output (Daemon)",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zerod = "zerod.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zerod"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
