[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "e2d"
version = "0.1.0"
description = "Platform-independent pieces of a small 2D game framework: geometry, colours, events, a frame clock, scene switching and input state"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "2d", "geometry", "affine", "scene", "input", "frame clock"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["e2d"]

[tool.pytest.ini_options]
addopts = "-ra"
