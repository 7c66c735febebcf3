[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "purefp"
version = "0.1.0"
description = "Small, plain-Python building blocks for functional programming: Maybe, composition, folds, lenses and friends."
requires-python = ">=3.10"
dependencies = []
keywords = ["functional", "functor", "monad", "lens", "composition", "fold"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["purefp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
