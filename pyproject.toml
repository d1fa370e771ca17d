[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "relicfs"
version = "0.1.0"
description = "Hex-text to binary conversion, chunked relic storage and a filtering pass-through file layer"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "chunking", "hex", "rot13", "storage"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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

[project.scripts]
relicfs-hexed = "relicfs.hexed:main"

[tool.hatch.build.targets.wheel]
packages = ["relicfs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
