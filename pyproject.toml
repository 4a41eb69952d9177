[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tree234"
version = "0.1.0"
description = "2-3-4 trees with operation statistics, red-black trees, and conversion between them"
requires-python = ">=3.10"
keywords = ["b-tree", "2-3-4 tree", "red-black tree", "data structures", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
tree234 = "tree234.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tree234"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
