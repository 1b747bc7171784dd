[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paintcore"
version = "0.1.0"
description = "Building blocks of a raster brush engine: dynamics, dab preparation, blend modes and colour helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["painting", "brush", "raster", "graphics", "blend modes", "dynamics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["paintcore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
