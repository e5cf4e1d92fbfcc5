[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparkconnect"
version = "0.1.0"
description = "Client-side building blocks for Spark Connect: data types and schemas, columnar result decoding, rows and logical plan relations."
requires-python = ">=3.10"
dependencies = []
keywords = ["spark", "spark-connect", "arrow", "dataframe", "sql", "schema"]
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
    "Topic :: Database :: Front-Ends",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sparkconnect"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
