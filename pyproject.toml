[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studentroll"
version = "0.1.0"
description = "Keep records of primary, high-school and college students in plain text files, with search, editing, statistics and rankings."
requires-python = ">=3.10"
dependencies = []
keywords = ["students", "grades", "records", "school", "ranking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
studentroll = "studentroll.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["studentroll"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
