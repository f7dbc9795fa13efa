[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyradar"
version = "0.1.0"
description = "Air traffic simulation logic: traffic scripts, planes, control towers, crashes, medals, skins and saves."
requires-python = ">=3.10"
keywords = ["air traffic", "radar", "simulation", "game"]
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
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["skyradar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
