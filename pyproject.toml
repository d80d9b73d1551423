[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ypts"
version = "0.1.0"
description = "Small toolkit of path, file, text, time and logging helpers, with a plain-text plug-in registry"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "file-io", "logging", "plugins", "toolkit"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ypts"]

[tool.hatch.build.targets.sdist]
include = ["ypts", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
