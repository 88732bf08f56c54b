[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arrayalgos"
version = "0.1.0"
description = "Classic prefix-sum, two-pointer, sliding-window and linked-list algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "arrays", "prefix sums", "two pointers", "sliding window", "linked list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arrayalgos"]

[tool.pytest.ini_options]
addopts = "-ra"
