[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pqbench"
version = "0.1.0"
description = "Benchmark a sorted-list priority queue against a binary max-heap priority queue."
requires-python = ">=3.10"
dependencies = []
keywords = ["priority queue", "heap", "sorted list", "benchmark", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
pqbench = "pqbench.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["pqbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
