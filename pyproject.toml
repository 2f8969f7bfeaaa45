[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shapekit"
version = "0.1.0"
description = "Composite 2D shapes with iterators, visitors, collision detection, a text parser and undoable drag-and-drop commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "shapes", "composite", "visitor", "iterator", "parser", "drag-and-drop", "undo"]
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
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shapekit = "shapekit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["shapekit"]

[tool.pytest.ini_options]
addopts = "-ra"
