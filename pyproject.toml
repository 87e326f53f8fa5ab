[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heaprec"
version = "0.1.0"
description = "Building blocks for a compact line-based, hex-encoded heap allocation trace format"
requires-python = ">=3.10"
dependencies = []
keywords = ["heap", "profiler", "allocation", "tracing", "memory", "backtrace"]
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
    "Topic :: Software Development :: Debuggers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["heaprec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
