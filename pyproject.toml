[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchtrees"
version = "0.1.0"
description = "Ordered maps backed by plain and AVL-balanced binary search trees, with a text tree printer and an equal-leaf-depth check."
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "avl", "balanced tree", "ordered map", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
searchtrees-demo = "searchtrees.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["searchtrees"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
