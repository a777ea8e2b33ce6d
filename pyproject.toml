[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kiwistorage"
version = "0.1.0"
description = "Filesystem helpers for a storage engine: directory checks, recursive creation and removal, scratch database paths"
requires-python = ">=3.10"
dependencies = []
keywords = ["storage", "filesystem", "directories", "database"]
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
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kiwistorage"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
