[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codebrain"
version = "0.1.0"
description = "A small multiple-choice programming quiz with three levels, scoring and review."
requires-python = ">=3.10"
dependencies = []
keywords = ["quiz", "multiple-choice", "education", "programming", "self-assessment"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
codebrain = "codebrain.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["codebrain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
