[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csvtreesort"
version = "0.1.0"
description = "Sort comma-separated rows by a column using a library sort or a binary tree sort"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "sort", "binary tree", "tree sort", "command line"]
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
csvtreesort = "csvtreesort.cli:main"
csvtreesort-generate = "csvtreesort.generator:main"

[tool.hatch.build.targets.wheel]
packages = ["csvtreesort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
