[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rmwnames"
version = "0.1.0"
description = "Validation of middleware topic names, node names and namespaces, plus security and init option records"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "middleware", "topic", "namespace", "node", "validation"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rmwnames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
