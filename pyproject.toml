[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atlassian-dc"
version = "0.1.0"
description = "Request types and HTTP transport for the Bitbucket Data Center REST API"
requires-python = ">=3.10"
keywords = ["atlassian", "bitbucket", "data center", "rest", "api client"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["atlassian_dc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
