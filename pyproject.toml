[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "delvegen"
version = "0.1.0"
description = "Procedural dungeon map generation for roguelike games"
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "procedural-generation", "dungeon", "map", "wave-function-collapse"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["delvegen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
