[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rbdates"
version = "0.1.0"
description = "A red-black tree with a tree-shaped text rendering, plus a simple comparable date-time value"
requires-python = ">=3.10"
dependencies = []
keywords = ["red-black tree", "binary search tree", "data structures", "datetime"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rbdates-demo = "rbdates.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["rbdates"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
