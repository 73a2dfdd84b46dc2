[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "urna"
version = "1.0.0"
description = "Terminal electronic voting booth: voter registration, login, voting for president and governor, results and candidate administration"
requires-python = ">=3.10"
dependencies = []
keywords = ["voting", "election", "ballot", "terminal", "urna"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
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
urna = "urna.app:main"

[tool.hatch.build.targets.wheel]
packages = ["urna"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
