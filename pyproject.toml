[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "astroengine"
version = "0.1.0"
description = "A small 2D arcade game engine: world, collisions, scoring, timers, input dispatch, shapes, sprites and images"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "arcade", "asteroids", "collision", "quaternion", "sprite"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["astroengine*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
