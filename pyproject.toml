[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "introspection-sdk"
version = "0.1.0"
description = "Configuration types for clients of the Introspection REST API"
requires-python = ">=3.10"
dependencies = []
keywords = ["ai", "llm", "introspection", "client", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["introspection_sdk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
