[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cuddlywidgets"
version = "0.1.0"
description = "Widget geometry, vertex buffers, pixel images and object caches for a small widget toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = ["widgets", "gui", "vertex-buffer", "cache", "toolkit", "geometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Widget Sets",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cuddlywidgets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
