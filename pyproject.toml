[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kernlib"
version = "0.1.0"
description = "Kernel-style data structures and software models of simple PC devices: linked lists, hash tables, bitmaps, block devices, partition tables and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked list",
    "hash table",
    "bitmap",
    "block device",
    "partition table",
    "rc4",
    "keyboard",
    "text screen",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
packages = ["kernlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
