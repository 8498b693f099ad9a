[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aengine"
version = "0.1.0"
description = "Quaternion, damping, debug-geometry and mesh utilities for a small 3D animation engine"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["3d", "graphics", "animation", "mesh", "obj", "quaternion", "damper", "spring"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["aengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
