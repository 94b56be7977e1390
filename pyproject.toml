[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glyphgrid"
version = "0.1.0"
description = "Settings, font options, window geometry and cursor animation logic for a grid-based editor front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "cursor", "animation", "easing", "guifont", "settings"]
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
    "Topic :: Text Editors",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["glyphgrid"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 99
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
