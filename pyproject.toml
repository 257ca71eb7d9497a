[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ouroboros"
version = "0.1.0"
description = "Runtime pieces of the Ouroboros scripting language: stack frames, symbol tables, classes, objects and simulated built-in functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "virtual machine", "scripting", "runtime"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ouroboros"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
