[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashserve"
version = "0.1.0"
description = "Building blocks for hashing newline-delimited byte streams with MD5: a streaming hasher, a blocking buffer queue and environment-based settings"
requires-python = ">=3.10"
dependencies = []
keywords = ["md5", "hash", "digest", "stream", "newline", "queue"]
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
    "Topic :: Internet",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hashserve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
