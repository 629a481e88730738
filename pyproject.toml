[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raster-engine"
version = "0.1.0"
description = "A small software raster engine: ARGB colours, 4x4 matrices, vectors, in-memory images and input state."
requires-python = ">=3.10"
dependencies = []
keywords = ["raster", "graphics", "matrix", "vector", "color", "input", "keymap"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["raster_engine"]

[tool.pytest.ini_options]
addopts = "-ra"
