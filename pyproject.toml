[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modtool"
version = "0.1.0"
description = "Read and write the big-endian binary records of MOD model files (vectors, colours, joints, materials, TEV blocks) and convert materials to and from JSON"
requires-python = ">=3.10"
dependencies = []
keywords = ["mod", "model", "3d", "gx", "binary", "materials", "tev", "json"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["modtool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
