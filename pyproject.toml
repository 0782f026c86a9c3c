[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "traveller"
version = "0.1.0"
description = "HTML tokenizing, DOM building, CSS selector matching, style computation and box layout for character-cell pages"
requires-python = ">=3.10"
dependencies = []
keywords = ["html", "css", "selector", "layout", "terminal", "dom"]
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
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["traveller"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
