[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gameframe"
version = "0.1.0"
description = "Core pieces of a small game framework: vector and matrix math, transforms, a layered draw-command queue, scenes, descriptor allocators, input state and WAV sound bookkeeping."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "vector", "matrix", "transform", "scene", "renderer", "wav"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gameframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
