[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sclib"
version = "2.0.0"
description = "Small utilities: a mutable string, clocks, threads, a hashed timer wheel and a URI parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "timer", "timer-wheel", "uri", "thread", "clock"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sclib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
