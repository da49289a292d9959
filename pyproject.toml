[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdftoolkit"
version = "0.1.0"
description = "Command-line toolkit for inspecting, merging, splitting and editing simple PDF files"
requires-python = ">=3.10"
dependencies = []
keywords = ["pdf", "merge", "split", "pages", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pdf = "pdftoolkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pdftoolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
