[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "satune"
version = "0.1.0"
description = "Core data structures, element and order encodings, model decoding and solver signature text for a constraint compiler"
requires-python = ">=3.10"
dependencies = []
keywords = ["sat", "smt", "alloy", "constraint-solving", "encoding", "hashtable", "introsort"]
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
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["satune"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
