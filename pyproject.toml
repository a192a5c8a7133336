[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classalgos"
version = "0.1.0"
description = "Small classic algorithms: Shell and Hoare sorting, complex arithmetic, brute-force travelling salesman, Boyer-Moore-Horspool search"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sorting",
    "shell-sort",
    "quicksort",
    "complex-numbers",
    "travelling-salesman",
    "permutations",
    "string-search",
    "boyer-moore-horspool",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
classalgos-sort = "classalgos.sortable:main"
classalgos-complex = "classalgos.complexnum:main"
classalgos-route = "classalgos.route:main"
classalgos-search = "classalgos.textsearch:main"

[tool.hatch.build.targets.wheel]
packages = ["classalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
