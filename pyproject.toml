[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadkit"
version = "0.1.0"
description = "Frame-driven game toolkit: colours, geometry, coroutines, state machines, input state and telemetry"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "gamedev", "coroutines", "geometry", "input", "animation", "profiling"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
