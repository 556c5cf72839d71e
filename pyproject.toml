[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "pipechain"
version = "0.1.0"
description = "Run a chain of commands connected by pipes, reading from an input file and writing to an output file"
requires-python = ">=3.10"
dependencies = []
keywords = ["pipeline", "pipe", "shell", "subprocess", "command-line"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pipechain = "pipechain.cli:main"

[tool.setuptools.packages.find]
include = ["pipechain*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
