[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "elbowengine"
version = "0.1.0"
description = "Platform and resource layer of a small game engine: graphics enums, Vulkan value mapping, image descriptions, filesystem helpers, windows, projects and an SQLite asset database"
requires-python = ">=3.10"
keywords = ["game-engine", "rhi", "vulkan", "assets", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["elbowengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
