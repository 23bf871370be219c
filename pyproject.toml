[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "webserv"
version = "1.0.0"
description = "A small event-loop HTTP server with virtual-host and per-path location configuration"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "web server", "virtual host", "selectors", "sockets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: No Input/Output (Daemon)",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
webserv = "webserv.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["webserv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
