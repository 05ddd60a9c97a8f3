[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ammobot"
version = "0.1.0"
description = "Building blocks for a bot that plays characters in a web-based MMO through its HTTP API"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["mmo", "bot", "automation", "game", "crafting", "http-api"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ammobot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
