[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zedlib"
version = "1.8.0"
description = "Character, string, number formatting, path and directory utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "utf-8", "case-conversion", "formatting", "paths", "directories", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
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
packages = ["zedlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
