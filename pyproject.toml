[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "parqueo"
version = "0.1.0"
description = "Console parking lot manager: vehicle and owner register, entry/exit history in plain text files, and a cell occupancy grid"
requires-python = ">=3.10"
dependencies = []
keywords = ["parking", "parqueadero", "vehicles", "history", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parqueo = "parqueo.cli:main"

[tool.setuptools.packages.find]
include = ["parqueo*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
