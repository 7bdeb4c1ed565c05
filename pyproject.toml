[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "storomata"
version = "0.1.0"
description = "Search agendas, tree stacks, pushdowns and their instructions, and equivalence relations for automata with storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["automata", "tree stack", "pushdown", "equivalence relation", "search", "agenda"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["storomata"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
