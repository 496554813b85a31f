[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcpsponge"
version = "0.1.0"
description = "Building blocks of a user-space TCP: byte streams, stream reassembly, segment headers and connection state summaries"
requires-python = ">=3.10"
keywords = ["tcp", "networking", "byte-stream", "reassembly", "checksum", "protocol"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tcpsponge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
