[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bintrees-kit"
version = "0.1.0"
description = "Linked binary tree nodes with traversals, measurements and an ASCII renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "tree", "traversal", "data structures", "ascii"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bintrees-demo = "bintrees_kit.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["bintrees_kit"]

[tool.pytest.ini_options]
addopts = "-ra"
