[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hierarkey"
version = "0.1.0"
description = "Generate hierarchical, dot-separated tree keys such as 0003.0001.0004 that sort in tree order"
requires-python = ">=3.10"
dependencies = []
keywords = ["hierarchy", "tree", "keys", "numbering", "outline"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hierarkey = "hierarkey.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hierarkey"]

[tool.pytest.ini_options]
addopts = "-ra"
