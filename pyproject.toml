[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "optkit"
version = "0.1.0"
description = "Typed, composable option builders backed by a plain dictionary"
requires-python = ">=3.10"
dependencies = []
keywords = ["options", "functional-options", "configuration", "builder"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["optkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
