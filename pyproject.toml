[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quickshapes"
version = "0.1.0"
description = "Geometry, layout, kinetic scrolling and touch handling for custom UI items, independent of any toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "layout", "touch", "kinetic scrolling", "bezier", "ui"]
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
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Multimedia :: Graphics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quickshapes"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
