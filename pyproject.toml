[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "konnectivity"
version = "0.1.0"
description = "Header names and agent identifier parsing for a network proxy between a control plane and its agents"
requires-python = ">=3.10"
dependencies = []
keywords = ["proxy", "networking", "agent", "identifiers", "headers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["konnectivity"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
