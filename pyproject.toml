[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strpipe"
version = "0.1.0"
description = "A threaded pipeline of string transforms, each stage with its own bounded queue"
requires-python = ">=3.10"
dependencies = []
keywords = ["pipeline", "threads", "producer-consumer", "text", "filters"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
strpipe = "strpipe.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["strpipe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
