[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "falsrue"
version = "0.1.0"
description = "Helpers for a small game: a section/key config reader, typewriter-style dialog frames and nearest-neighbour pixel scaling"
requires-python = ">=3.10"
keywords = ["config", "ini", "dialog", "typewriter", "nearest-neighbour", "scaling", "pixels"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["falsrue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
