[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "triagekit"
version = "0.1.0"
description = "Building blocks for triaging issues and pull requests: filters, review state, title similarity and layered caching"
requires-python = ">=3.10"
keywords = ["triage", "issues", "pull-requests", "cache", "bug-tracking"]
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
    "Topic :: Software Development :: Bug Tracking",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["triagekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
