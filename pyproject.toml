[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treelox"
version = "1.0.0"
description = "A tree-walking interpreter for a small dynamically typed scripting language"
requires-python = ">=3.10"
keywords = ["interpreter", "lox", "tree-walking", "scripting", "language", "repl"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treelox = "treelox.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["treelox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
